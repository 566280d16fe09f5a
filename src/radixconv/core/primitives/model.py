# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable value objects. Lazily derived runtime state is kept in private
    attributes, which are excluded from field-level freezing.
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable models; derived caches live in private attributes
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
