# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import re
from typing import FrozenSet

from pydantic import Field, model_validator

from .model import Model
from .types import Symbol

# Never usable as digits, whatever sign and padding are configured
STRUCTURAL_SYMBOLS = frozenset(("-", " "))


class NotationSettings(Model):
    """
    Structural symbols of a written number.

    A digit string is an optional sign symbol, followed by any number of
    padding symbols, followed by the digits. Neither symbol may appear in a
    digit alphabet, and the minus sign and space stay reserved under every
    notation.

    Usage Examples:
        # Default notation: "-   64"
        notation = NotationSettings()

        # Underscore padding: "-__64"
        notation = NotationSettings(padding="_")
    """

    sign: Symbol = Field(
        default="-", description="Leading symbol marking a negative number."
    )
    padding: Symbol = Field(
        default=" ",
        description="Symbol allowed between the sign and the first digit.",
    )

    @model_validator(mode="after")
    def validate_distinct_symbols(self) -> "NotationSettings":
        """Ensure the sign and padding symbols can be told apart."""
        if self.sign == self.padding:
            raise ValueError("sign and padding must be different symbols")
        return self

    @property
    def reserved_symbols(self) -> FrozenSet[str]:
        """Symbols that can never be used as digits."""
        return STRUCTURAL_SYMBOLS | {self.sign, self.padding}

    @property
    def sign_prefix(self) -> re.Pattern:
        """Pattern matching the sign and its padding at the start of a string."""
        return re.compile(f"^{re.escape(self.sign)}{re.escape(self.padding)}*")


DEFAULT_NOTATION = NotationSettings()
