# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Capability layer over esprima: node builders, queries and value read-back."""

from __future__ import annotations

from .builders import (
    array_expression,
    call_expression,
    identifier,
    literal,
    member_expression,
    new_expression,
    object_expression,
    property_node,
    regex_literal,
    variable_declaration,
    variable_declarator,
)
from .query import (
    NodePath,
    find,
    find_config_object,
    find_nodes,
    is_type,
    node_type,
    parse_expression,
    parse_script,
    safe_traverse,
    walk,
)
from .values import node_to_value, property_key_name

__all__ = [
    "NodePath",
    "array_expression",
    "call_expression",
    "find",
    "find_config_object",
    "find_nodes",
    "identifier",
    "is_type",
    "literal",
    "member_expression",
    "new_expression",
    "node_to_value",
    "node_type",
    "object_expression",
    "parse_expression",
    "parse_script",
    "property_key_name",
    "property_node",
    "regex_literal",
    "safe_traverse",
    "variable_declaration",
    "variable_declarator",
    "walk",
]
