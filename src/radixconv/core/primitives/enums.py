# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import string
from enum import Enum
from typing import Tuple


class NumberSystem(str, Enum):
    """
    Digit alphabets of commonly used number systems.

    Each member's value is its alphabet written as a string; the position of a
    character is its digit value. Members are plain strings, so they can be
    passed anywhere an alphabet is accepted:

        RadixConverter(NumberSystem.HEX, NumberSystem.OCT)
    """

    BIN = "01"
    OCT = string.octdigits
    DEC = string.digits
    HEX = string.digits + "ABCDEF"
    BASE_36 = string.digits + string.ascii_uppercase

    @property
    def symbols(self) -> Tuple[str, ...]:
        """The alphabet as a tuple of single-character symbols."""
        return tuple(self.value)

    @property
    def radix(self) -> int:
        """Number of digits in the alphabet."""
        return len(self.value)
