# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
radixconv Core

Primitives and error types used by the converter.
"""

from .errors import (
    InvalidAlphabetError,
    InvalidDigitError,
    NullArgumentError,
    RadixError,
)
from .primitives import (
    DEFAULT_NOTATION,
    Alphabet,
    Model,
    NotationSettings,
    NumberSystem,
)

__all__ = [
    "Alphabet",
    "DEFAULT_NOTATION",
    "InvalidAlphabetError",
    "InvalidDigitError",
    "Model",
    "NotationSettings",
    "NullArgumentError",
    "NumberSystem",
    "RadixError",
]
