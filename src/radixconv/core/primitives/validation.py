# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Validation utilities for digit alphabets and digit strings.

This module provides the checks shared by every converter:
- Alphabet well-formedness (size, empty slots, uniqueness, reserved symbols)
- Sign detection on digit strings
- Digit membership against an alphabet
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Any, Tuple

from ..errors import InvalidAlphabetError, InvalidDigitError, NullArgumentError
from .settings import NotationSettings
from .types import Alphabet

MIN_RADIX = 2


def validate_alphabet(symbols: Any, name: str = "alphabet") -> Alphabet:
    """
    Validate a candidate digit alphabet and return an immutable copy.

    Args:
        symbols: Ordered sequence of single-character symbols (a ``str``,
            ``list`` or ``tuple``)
        name: Name used in error messages

    Returns:
        The alphabet as a tuple of symbols

    Raises:
        NullArgumentError: If ``symbols`` is None
        InvalidAlphabetError: If the alphabet is unordered, shorter than two
            symbols, holds an empty slot, a non-character symbol or a
            duplicate
    """
    if symbols is None:
        raise NullArgumentError(f"{name} must not be None")
    if not isinstance(symbols, Sequence):
        raise InvalidAlphabetError(
            f"{name} must be an ordered sequence, got {type(symbols).__name__}"
        )

    alphabet = tuple(symbols)

    if len(alphabet) < MIN_RADIX:
        raise InvalidAlphabetError(
            f"{name} must include at least {MIN_RADIX} digits, got {len(alphabet)}"
        )
    if None in alphabet:
        raise InvalidAlphabetError(f"{name} must not include None")

    malformed = [s for s in alphabet if not isinstance(s, str) or len(s) != 1]
    if malformed:
        raise InvalidAlphabetError(
            f"{name} digits must be single characters, got {malformed!r}"
        )

    duplicates = [s for s, count in Counter(alphabet).items() if count > 1]
    if duplicates:
        raise InvalidAlphabetError(
            f"All digits of {name} must be unique, repeated: {duplicates!r}"
        )

    return alphabet


def check_reserved_symbols(
    alphabet: Alphabet, notation: NotationSettings, name: str = "alphabet"
) -> None:
    """
    Ensure no digit is a reserved sign or padding symbol.

    Raises:
        InvalidAlphabetError: If the alphabet uses a reserved symbol
    """
    clashes = sorted(notation.reserved_symbols.intersection(alphabet))
    if clashes:
        raise InvalidAlphabetError(
            f"{name} must not include the reserved symbols "
            f"{sorted(notation.reserved_symbols)!r}, found {clashes!r}"
        )


def split_sign(digits: Any, notation: NotationSettings) -> Tuple[bool, str]:
    """
    Strip the leading sign and its padding from a digit string.

    Only one sign prefix at the very start is recognized; a sign anywhere else
    is left in place and will fail digit validation.

    Args:
        digits: The digit string
        notation: Sign and padding symbols in effect

    Returns:
        ``(negative, remainder)``

    Raises:
        NullArgumentError: If ``digits`` is None
        TypeError: If ``digits`` is not a string
    """
    if digits is None:
        raise NullArgumentError("digit string must not be None")
    if not isinstance(digits, str):
        raise TypeError(f"digit string must be a str, got {type(digits).__name__}")

    remainder = notation.sign_prefix.sub("", digits, count=1)
    return len(remainder) < len(digits), remainder


def check_digits(digits: str, remainder: str, alphabet: Alphabet) -> None:
    """
    Ensure every character of ``remainder`` is a digit of ``alphabet``.

    Raises:
        InvalidDigitError: Listing each offending symbol once, in order of
            first appearance
    """
    allowed = set(alphabet)
    invalid = tuple(dict.fromkeys(ch for ch in remainder if ch not in allowed))
    if invalid:
        raise InvalidDigitError(digits, invalid)
