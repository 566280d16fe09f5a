# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for radixconv tests.

Converters between the predefined number systems plus a few custom
alphabets used throughout the unit and integration suites.
"""

from __future__ import annotations

import pytest

from radixconv import NumberSystem, RadixConverter

QUINARY = ["0", "1", "2", "3", "4"]


@pytest.fixture
def dec_to_quinary() -> RadixConverter:
    return RadixConverter(NumberSystem.DEC, QUINARY)


@pytest.fixture
def hex_to_oct() -> RadixConverter:
    return RadixConverter(NumberSystem.HEX, NumberSystem.OCT)


@pytest.fixture
def hex_to_base36() -> RadixConverter:
    return RadixConverter(NumberSystem.HEX, NumberSystem.BASE_36)


@pytest.fixture
def dec_to_dec() -> RadixConverter:
    return RadixConverter(NumberSystem.DEC, NumberSystem.DEC)
