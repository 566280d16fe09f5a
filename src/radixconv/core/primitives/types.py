# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated, Tuple

from pydantic import Field

# constrained types
Symbol = Annotated[str, Field(strict=True, min_length=1, max_length=1)]
Alphabet = Tuple[Symbol, ...]
