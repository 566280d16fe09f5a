# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
radixconv Core Primitives

Building blocks shared by every converter: the frozen base model, notation
settings, predefined number systems and alphabet validation.
"""

# Export key primitives for convenient access
from .enums import NumberSystem
from .model import Model
from .settings import DEFAULT_NOTATION, STRUCTURAL_SYMBOLS, NotationSettings
from .types import Alphabet, Symbol
from .validation import (
    MIN_RADIX,
    check_digits,
    check_reserved_symbols,
    split_sign,
    validate_alphabet,
)

__all__ = [
    "Alphabet",
    "DEFAULT_NOTATION",
    "MIN_RADIX",
    "Model",
    "NotationSettings",
    "NumberSystem",
    "STRUCTURAL_SYMBOLS",
    "Symbol",
    "check_digits",
    "check_reserved_symbols",
    "split_sign",
    "validate_alphabet",
]
