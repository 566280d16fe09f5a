# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Error types raised to callers of radixconv.

None of these derive from ``ValueError``: pydantic wraps ``ValueError`` raised
inside validators into ``ValidationError``, and alphabet problems must reach
the caller as their own catchable type.
"""

from __future__ import annotations

from typing import Tuple


class RadixError(Exception):
    """Base class for all radixconv errors."""


class NullArgumentError(RadixError, TypeError):
    """Raised when a required alphabet or input string is ``None``."""


class InvalidAlphabetError(RadixError):
    """Raised for alphabets that are too short, repeat symbols, contain empty
    slots or use a reserved notation symbol as a digit."""


class InvalidDigitError(RadixError):
    """Raised when a digit string contains symbols outside its alphabet."""

    def __init__(self, digits: str, invalid_symbols: Tuple[str, ...]):
        self.digits = digits
        self.invalid_symbols = invalid_symbols
        super().__init__(
            f"Input {digits!r} contains invalid digit(s): "
            + ", ".join(repr(s) for s in invalid_symbols)
        )
