# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Conversion of integers between user-defined positional number systems.

A number system is given by its digit alphabet: an ordered sequence of
symbols where each symbol's position is its digit value. A converter holds a
source and a target alphabet and turns digit strings written in the first
into digit strings written in the second.

Example Usage:
    ```python
    from radixconv import NumberSystem, RadixConverter

    converter = RadixConverter(NumberSystem.HEX, NumberSystem.OCT)
    converter.convert("64")        # "144"
    converter.convert("-   64")    # "-144"
    converter.decode("FF")         # 255
    converter.reversed().convert("144")  # "64"
    ```
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Any, Dict, Optional, Tuple

from pydantic import (
    Field,
    PrivateAttr,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .core.errors import NullArgumentError
from .core.primitives import (
    DEFAULT_NOTATION,
    Alphabet,
    Model,
    NotationSettings,
    check_digits,
    check_reserved_symbols,
    split_sign,
    validate_alphabet,
)

logger = logging.getLogger(__name__)

# Guards first materialization of every converter's reversed companion
_reversed_lock = threading.Lock()


class RadixConverter(Model):
    """
    Converts integers from one digit alphabet to another.

    Both alphabets are validated and copied into tuples on construction, so
    the converter is unaffected by later changes to the caller's sequences.
    Equality and hashing are by value over the alphabets and notation.

    Attributes:
        source_alphabet: Digits of the number system inputs are written in
        target_alphabet: Digits of the number system outputs are written in
        notation: Sign and padding symbols of written numbers
    """

    source_alphabet: Alphabet
    target_alphabet: Alphabet
    notation: NotationSettings = Field(default=DEFAULT_NOTATION)

    _reversed: Optional[RadixConverter] = PrivateAttr(default=None)

    def __init__(
        self,
        source_alphabet: Sequence[str],
        target_alphabet: Sequence[str],
        **data: Any,
    ) -> None:
        super().__init__(
            source_alphabet=source_alphabet, target_alphabet=target_alphabet, **data
        )

    @field_validator("source_alphabet", "target_alphabet", mode="before")
    @classmethod
    def validate_alphabets(cls, value: Any, info: ValidationInfo) -> Alphabet:
        return validate_alphabet(value, info.field_name)

    @model_validator(mode="after")
    def validate_reserved_symbols(self) -> "RadixConverter":
        """Ensure neither alphabet uses the notation's sign or padding."""
        check_reserved_symbols(self.source_alphabet, self.notation, "source_alphabet")
        check_reserved_symbols(self.target_alphabet, self.notation, "target_alphabet")
        logger.debug(
            f"Created converter from radix {self.source_radix} to radix {self.target_radix}"
        )
        return self

    @property
    def source_radix(self) -> int:
        return len(self.source_alphabet)

    @property
    def target_radix(self) -> int:
        return len(self.target_alphabet)

    def decode(self, digits: str) -> int:
        """
        Return the integer value of a digit string in the source alphabet.

        A single leading sign, optionally followed by padding, marks a
        negative number. A string without digits decodes to zero.

        Args:
            digits: Number written in the source alphabet

        Returns:
            The integer value

        Raises:
            NullArgumentError: If ``digits`` is None
            InvalidDigitError: If a character after the sign prefix is not a
                digit of the source alphabet
        """
        negative, magnitude = self._parse(digits)
        return -magnitude if negative else magnitude

    def _parse(self, digits: str) -> Tuple[bool, int]:
        """Split a source digit string into its sign flag and magnitude."""
        negative, remainder = split_sign(digits, self.notation)
        check_digits(digits, remainder, self.source_alphabet)

        values: Dict[str, int] = {s: i for i, s in enumerate(self.source_alphabet)}
        radix = self.source_radix
        magnitude = 0
        for symbol in remainder:
            magnitude = magnitude * radix + values[symbol]

        return negative, magnitude

    def encode(self, value: int) -> str:
        """
        Write an integer in the target alphabet.

        Zero is written as the alphabet's first symbol; negative values get a
        leading sign and no padding.

        Raises:
            NullArgumentError: If ``value`` is None
            TypeError: If ``value`` is not an integer
        """
        if value is None:
            raise NullArgumentError("value must not be None")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be an int, got {type(value).__name__}")

        return self._write(value < 0, abs(value))

    def _write(self, negative: bool, magnitude: int) -> str:
        radix = self.target_radix
        symbols = []
        while magnitude >= radix:
            magnitude, remainder = divmod(magnitude, radix)
            symbols.append(self.target_alphabet[remainder])
        symbols.append(self.target_alphabet[magnitude])
        if negative:
            symbols.append(self.notation.sign)

        return "".join(symbols[::-1])

    def convert(self, digits: str) -> str:
        """
        Rewrite a number from the source alphabet into the target alphabet.

        The sign is taken from the input string, so a negative zero such as
        ``"-0"`` or a bare ``"-"`` is written as the sign followed by the
        target alphabet's zero symbol.

        Raises:
            NullArgumentError: If ``digits`` is None
            InvalidDigitError: If ``digits`` is not a valid source number
        """
        negative, magnitude = self._parse(digits)
        return self._write(negative, magnitude)

    def reversed(self) -> RadixConverter:
        """
        Return the converter from the target alphabet back to the source one.

        The reversed converter is built on first use and cached; its own
        reversed converter is this instance.
        """
        if self._reversed is None:
            with _reversed_lock:
                if self._reversed is None:
                    converter = RadixConverter(
                        self.target_alphabet,
                        self.source_alphabet,
                        notation=self.notation,
                    )
                    converter._reversed = self
                    self._reversed = converter
                    logger.debug("Materialized reversed converter")
        return self._reversed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RadixConverter):
            return NotImplemented
        return (
            self.source_alphabet == other.source_alphabet
            and self.target_alphabet == other.target_alphabet
            and self.notation == other.notation
        )

    def __hash__(self) -> int:
        return hash((self.source_alphabet, self.target_alphabet, self.notation))

    def __repr_args__(self):
        yield "from", "".join(self.source_alphabet)
        yield "to", "".join(self.target_alphabet)
        if self.notation != DEFAULT_NOTATION:
            yield "notation", self.notation

    def __str__(self) -> str:
        return (
            f"RadixConverter from [{''.join(self.source_alphabet)}] "
            f"to [{''.join(self.target_alphabet)}]"
        )
