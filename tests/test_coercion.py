# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for scalar coercion into literal and identifier nodes."""

from __future__ import annotations

import re

import pytest

from astmerge.coercion import (
    coerce_scalar,
    create_external_regexp,
    create_identifier_or_literal,
    create_literal,
)
from astmerge.description import Fragment
from astmerge.toolkit.builders import identifier
from astmerge.toolkit.query import node_type, safe_traverse


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("false", False),
        ("1", 1),
        ("-3", -3),
        ("1.5", 1.5),
        ("1e3", 1000.0),
        ("0x10", 16),
        ("abc", "abc"),
        ("True", "True"),
        ("", ""),
        ("1.2.3", "1.2.3"),
        (7, 7),
        (None, None),
    ],
)
def test_coerce_scalar(raw, expected) -> None:
    """Boolean and numeric strings should coerce to primitives."""

    result = coerce_scalar(raw)
    assert result == expected
    assert type(result) is type(expected)


def test_create_literal_keeps_plain_strings_quoted() -> None:
    """Plain strings should stay quoted string literals."""

    node = create_literal("bundle.js")
    assert node_type(node) == "Literal"
    assert node.value == "bundle.js"
    assert node.raw == '"bundle.js"'


def test_create_literal_coerces_numeric_and_boolean_strings() -> None:
    """Numeric and boolean strings should become typed literals."""

    assert create_literal("8080").value == 8080
    assert create_literal("true").value is True
    assert create_literal("true").raw == "true"


def test_create_identifier_or_literal_emits_identifier_for_plain_strings() -> None:
    """Plain strings should become identifiers."""

    node = create_identifier_or_literal("'source-map'")
    assert node_type(node) == "Identifier"
    assert node.name == "'source-map'"


def test_create_identifier_or_literal_coerces_before_choosing() -> None:
    """Coercible strings should still become literals."""

    number = create_identifier_or_literal("42")
    flag = create_identifier_or_literal(False)
    assert node_type(number) == "Literal"
    assert number.value == 42
    assert node_type(flag) == "Literal"
    assert flag.value is False


def test_patterns_become_regex_literals() -> None:
    """Compiled patterns should become regex literals."""

    node = create_identifier_or_literal(re.compile(r"\.jsx?$", re.IGNORECASE))
    assert node_type(node) == "Literal"
    assert safe_traverse(node, ("regex", "pattern")) == r"\.jsx?$"
    assert safe_traverse(node, ("regex", "flags")) == "i"
    assert node.raw == r"/\.jsx?$/i"


def test_regex_fragment_is_reemitted_as_new_literal() -> None:
    """Regex fragments should be rebuilt as fresh literals."""

    fragment = Fragment.parse(r"/\.css$/")
    node = create_identifier_or_literal(fragment)
    assert node is not fragment.node
    assert safe_traverse(node, ("regex", "pattern")) == r"\.css$"
    assert create_external_regexp(fragment).raw == r"/\.css$/"


def test_non_regex_fragment_is_embedded_unchanged() -> None:
    """Non-regex fragments should be embedded as the same node."""

    fragment = Fragment(identifier("path"))
    assert create_identifier_or_literal(fragment) is fragment.node


def test_external_regexp_requires_regex_fragment() -> None:
    """Re-emitting a non-regex fragment should raise ``TypeError``."""

    with pytest.raises(TypeError):
        create_external_regexp(Fragment(identifier("notARegex")))


@pytest.mark.parametrize("value", [[1, 2], {"a": 1}])
def test_containers_are_not_single_values(value) -> None:
    """Sequences and mappings cannot become a single value node."""

    with pytest.raises(TypeError):
        create_literal(value)
    with pytest.raises(TypeError):
        create_identifier_or_literal(value)
