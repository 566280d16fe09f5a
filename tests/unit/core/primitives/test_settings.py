# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from radixconv.core.primitives import DEFAULT_NOTATION, NotationSettings


def test_notation_settings_default_instantiation():
    """Test that NotationSettings defaults to a minus sign and space padding."""
    notation = NotationSettings()
    assert notation.sign == "-"
    assert notation.padding == " "
    assert notation == DEFAULT_NOTATION
    assert notation.reserved_symbols == frozenset({"-", " "})


def test_notation_settings_custom_instantiation():
    notation = NotationSettings(sign="~", padding="_")
    assert notation.reserved_symbols == frozenset({"~", "_", "-", " "})
    assert notation != DEFAULT_NOTATION


@pytest.mark.parametrize(
    "kwargs",
    [
        {"sign": "-", "padding": "-"},  # indistinguishable
        {"sign": "--"},
        {"padding": ""},
        {"sign": 1},
    ],
)
def test_notation_settings_validation_failure(kwargs):
    """Test that malformed sign/padding combinations are rejected."""
    with pytest.raises(ValidationError):
        NotationSettings(**kwargs)


def test_sign_prefix_strips_sign_and_padding_only_once():
    prefix = DEFAULT_NOTATION.sign_prefix
    assert prefix.sub("", "-   64", count=1) == "64"
    assert prefix.sub("", "--64", count=1) == "-64"
    assert prefix.sub("", "64-", count=1) == "64-"
    assert prefix.sub("", " -64", count=1) == " -64"


def test_sign_prefix_escapes_regex_metacharacters():
    """Test that symbols such as '+' or '.' are matched literally."""
    notation = NotationSettings(sign="+", padding=".")
    assert notation.sign_prefix.sub("", "+..42", count=1) == "42"
    assert notation.sign_prefix.sub("", "42", count=1) == "42"


def test_notation_settings_is_frozen():
    """Test that notation symbols cannot be reassigned after instantiation."""
    notation = NotationSettings()
    with pytest.raises(ValidationError):
        notation.sign = "~"


def test_notation_settings_forbids_unknown_fields():
    """Test that misspelled settings are rejected instead of silently ignored."""
    with pytest.raises(ValidationError):
        NotationSettings(sgn="~")


def test_notation_settings_hash_follows_value():
    assert hash(NotationSettings(sign="~")) == hash(NotationSettings(sign="~"))
    assert len({NotationSettings(), DEFAULT_NOTATION}) == 1
