# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for classifying plain configuration descriptions."""

from __future__ import annotations

import re

import pytest

from astmerge.description import (
    Fragment,
    MappingValue,
    PatternValue,
    ScalarValue,
    SequenceValue,
    dedupe_values,
    describe,
    describe_mapping,
)
from astmerge.toolkit.builders import literal


def test_describe_tags_each_variant() -> None:
    """Each plain value kind should map to its tagged variant."""

    pattern = re.compile(r"\.ts$")
    node = literal(3)
    described = describe(
        {
            "mode": "production",
            "test": pattern,
            "extensions": [".js", ".ts"],
            "output": {"path": "dist"},
            "raw": node,
        }
    )

    assert isinstance(described, MappingValue)
    values = dict(described.entries)
    assert values["mode"] == ScalarValue("production")
    assert values["test"] == PatternValue(pattern)
    assert isinstance(values["extensions"], SequenceValue)
    assert isinstance(values["output"], MappingValue)
    assert isinstance(values["raw"], Fragment)
    assert values["raw"].node is node


def test_describe_preserves_key_order() -> None:
    """Mapping entries should keep insertion order."""

    described = describe_mapping({"z": 1, "a": 2, "m": 3})
    assert described.keys() == ["z", "a", "m"]


def test_describe_is_idempotent_on_tagged_values() -> None:
    """Already tagged values should pass through unchanged."""

    described = describe({"a": [1, 2]})
    assert describe(described) is described


@pytest.mark.parametrize("value", [object(), {1: "numeric key"}, {"nested": {"bad": {1, 2}}}])
def test_describe_rejects_malformed_input(value) -> None:
    """Unsupported values and keys should raise ``TypeError``."""

    with pytest.raises(TypeError):
        describe(value)


def test_describe_mapping_rejects_non_mappings() -> None:
    """Only mappings should be accepted as top-level descriptions."""

    with pytest.raises(TypeError):
        describe_mapping(["not", "a", "mapping"])


def test_pattern_value_exposes_javascript_flags() -> None:
    """Python regex flags should map to JavaScript flag letters."""

    value = PatternValue(re.compile("abc", re.IGNORECASE | re.MULTILINE))
    assert value.source == "abc"
    assert value.flags == "im"


def test_fragment_parse_detects_regex_literals() -> None:
    """Parsed fragments should report whether they are regexes."""

    assert Fragment.parse("/abc/g").is_regex
    assert not Fragment.parse("path.resolve(__dirname)").is_regex


def test_dedupe_values_keeps_first_occurrence_order() -> None:
    """Deduplication should keep the first occurrence of each value."""

    values = ["a", 1, "b", "a", 1.0, {"x": 1}, {"x": 1}, True]
    assert dedupe_values(values) == ["a", 1, "b", {"x": 1}, True]


def test_dedupe_values_compares_patterns_structurally() -> None:
    """Equal regular expressions should collapse to one entry."""

    first = re.compile(r"\.js$")
    result = dedupe_values([first, re.compile(r"\.js$"), re.compile(r"\.css$")])
    assert len(result) == 2
    assert result[0] is first


def test_dedupe_values_accepts_custom_identity() -> None:
    """A custom identity function should drive deduplication."""

    assert dedupe_values(["A", "a", "b"], key=str.lower) == ["A", "b"]
