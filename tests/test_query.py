# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering parsing helpers and structural queries."""

from __future__ import annotations

import pytest

from astmerge.errors import NodeShapeError, SourceParseError
from astmerge.toolkit.builders import identifier, literal, object_expression, property_node
from astmerge.toolkit.query import (
    NodePath,
    find,
    find_config_object,
    find_nodes,
    is_type,
    matches_shape,
    node_type,
    parse_expression,
    parse_script,
    require_type,
    safe_traverse,
    walk,
)
from astmerge.toolkit.values import node_to_value


def test_walk_visits_nodes_in_source_order() -> None:
    """Traversal should visit nodes depth first in source order."""

    node = parse_expression("[a, [b, c], d]")

    names = [path.node.name for path in walk(node) if path.type == "Identifier"]

    assert names == ["a", "b", "c", "d"]


def test_walk_records_parent_and_field() -> None:
    """Paths should record their parent, field and index."""

    node = parse_expression("({ key: value })")

    paths = {path.node.name: path for path in walk(node) if path.type == "Identifier"}

    assert paths["value"].field == "value"
    assert paths["value"].parent.type == "Property"
    assert paths["value"].parent.field == "properties"
    assert paths["value"].parent.index == 0


def test_find_filters_by_shape(program) -> None:
    """Shape filters should select nested attribute values."""

    matches = find(program, "Property", {"key": {"name": "resolve"}})

    assert len(matches) == 1
    assert node_type(matches[0].node.value) == "ObjectExpression"


def test_find_nodes_returns_nodes(program) -> None:
    """``find_nodes`` should unwrap matching paths."""

    calls = find_nodes(program, "CallExpression", {"callee": {"name": "require"}})
    assert [call.arguments[0].value for call in calls] == ["webpack", "extract-text-webpack-plugin"]


def test_find_accepts_predicate(program) -> None:
    """A predicate should further filter matches."""

    matches = find(program, "NewExpression", predicate=lambda path: bool(path.node.arguments))
    assert len(matches) == 1


def test_matches_shape_handles_missing_members() -> None:
    """Missing attributes should fail a shape match."""

    node = identifier("x")
    assert matches_shape(node, {"name": "x"})
    assert not matches_shape(node, {"key": {"name": "x"}})
    assert not matches_shape(None, {"name": "x"})


def test_safe_traverse() -> None:
    """Attribute chains should resolve or yield ``None``."""

    prop = property_node(identifier("mode"), literal("production"))

    assert safe_traverse(prop, ("key", "name")) == "mode"
    assert safe_traverse(prop, ("value", "missing", "deeper")) is None
    assert safe_traverse({"a": {"b": 1}}, ("a", "b")) == 1


def test_is_type_accepts_nodes_and_paths() -> None:
    """Type checks should accept nodes and paths alike."""

    node = object_expression()
    assert is_type(node, "ObjectExpression")
    assert is_type(NodePath(node), "ObjectExpression")
    assert not is_type("ObjectExpression", "ObjectExpression")


def test_require_type_raises_node_shape_error() -> None:
    """Type mismatches should raise ``NodeShapeError``."""

    with pytest.raises(NodeShapeError) as excinfo:
        require_type(identifier("x"), "ArrayExpression")
    assert excinfo.value.actual == "Identifier"


def test_node_path_replace_swaps_child() -> None:
    """Replacing a path should update its parent list."""

    array = parse_expression("[a, b]")
    target = next(path for path in walk(array) if path.type == "Identifier" and path.node.name == "b")

    target.replace(literal(2))

    assert node_to_value(array) == ["a", 2]


def test_node_path_replace_refuses_root() -> None:
    """Replacing the search root should raise ``ValueError``."""

    with pytest.raises(ValueError):
        NodePath(identifier("x")).replace(identifier("y"))


def test_parse_expression_requires_single_expression() -> None:
    """Multiple statements should not parse as one expression."""

    with pytest.raises(ValueError):
        parse_expression("a; b")


def test_parse_script_wraps_syntax_errors() -> None:
    """esprima syntax errors should surface as ``SourceParseError``."""

    with pytest.raises(SourceParseError):
        parse_script("module.exports = {")


def test_find_config_object_prefers_module_exports(config_object) -> None:
    """The ``module.exports`` object should be returned."""

    assert node_to_value(config_object)["entry"] == "./src/index.js"


def test_find_config_object_falls_back_to_declarations() -> None:
    """A declared object literal should be used when nothing is assigned."""

    program = parse_script("const config = { mode: 'none' };\nmodule.exports = config;")
    assert node_to_value(find_config_object(program)) == {"mode": "none"}


def test_find_config_object_requires_object_literal() -> None:
    """A config without any object literal should raise."""

    with pytest.raises(NodeShapeError):
        find_config_object(parse_script("module.exports = createConfig();"))
