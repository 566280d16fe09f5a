# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
radixconv - Integer conversion between arbitrary positional number systems

A number system is defined by its digit alphabet, an ordered sequence of
symbols whose positions are their digit values. Values are decoded into
Python integers, so numbers of any size (cryptographic digests included)
convert exactly.

Key Entry Points:
- radixconv.RadixConverter - Converter between a source and a target alphabet
- radixconv.NumberSystem - Predefined alphabets (BIN, OCT, DEC, HEX, BASE_36)
- radixconv.NotationSettings - Sign and padding symbols of written numbers

Example Usage:
    ```python
    from radixconv import NumberSystem, RadixConverter

    hex_to_base36 = RadixConverter(NumberSystem.HEX, NumberSystem.BASE_36)
    short_id = hex_to_base36.convert("9E107D9D372BB6826BD81D3542A419D6")
    digest = hex_to_base36.reversed().convert(short_id)
    ```
"""

import importlib
import logging

# Add a NullHandler to the root logger to prevent "No handlers could be found" warnings
# when the library is used in applications that don't configure logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "InvalidAlphabetError",
    "InvalidDigitError",
    "NotationSettings",
    "NullArgumentError",
    "NumberSystem",
    "RadixConverter",
    "RadixError",
]


_LAZY_ATTRS = {
    "InvalidAlphabetError": "radixconv.core.errors",
    "InvalidDigitError": "radixconv.core.errors",
    "NotationSettings": "radixconv.core.primitives",
    "NullArgumentError": "radixconv.core.errors",
    "NumberSystem": "radixconv.core.primitives",
    "RadixConverter": "radixconv.converter",
    "RadixError": "radixconv.core.errors",
}


def __getattr__(name: str):
    module_path = _LAZY_ATTRS.get(name)
    if module_path is None:
        raise AttributeError(f"module 'radixconv' has no attribute '{name}'")
    value = getattr(importlib.import_module(module_path), name)
    globals()[name] = value
    return value
