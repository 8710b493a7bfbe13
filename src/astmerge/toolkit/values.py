# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read static Python values back out of esprima nodes."""

from __future__ import annotations

import re
from typing import Any

from esprima import nodes

from ..errors import StaticValueError
from .builders import regex_literal
from .query import node_type, safe_traverse
from .syntax import (
    ARRAY_EXPRESSION,
    IDENTIFIER,
    LITERAL,
    OBJECT_EXPRESSION,
    PROPERTY,
    UNARY_EXPRESSION,
)


def property_key_name(prop: nodes.Node) -> str | None:
    """Return the key of a ``Property`` as a string, ``None`` for computed keys."""

    if node_type(prop) != PROPERTY or safe_traverse(prop, ("computed",)):
        return None
    key = safe_traverse(prop, ("key",))
    kind = node_type(key)
    if kind == IDENTIFIER:
        return key.name
    if kind == LITERAL:
        return str(literal_value(key))
    return None


def literal_value(node: nodes.Node) -> Any:
    """Return the Python value of a ``Literal`` node.

    Regular expression literals are returned as compiled :class:`re.Pattern`
    objects, rebuilt from ``regex.pattern``/``regex.flags`` when esprima left
    ``value`` empty.
    """

    pattern = safe_traverse(node, ("regex", "pattern"))
    if pattern is not None:
        value = safe_traverse(node, ("value",))
        if isinstance(value, re.Pattern):
            return value
        rebuilt = regex_literal(pattern, safe_traverse(node, ("regex", "flags")) or "")
        return rebuilt.value
    return safe_traverse(node, ("value",))


def node_to_value(node: nodes.Node | None) -> Any:
    """Convert a static expression node into the equivalent Python value.

    Args:
        node: Literal, identifier, array, object or negated numeric literal.

    Returns:
        Any: Literal values as-is, identifiers as their name, arrays as lists and
        objects as dicts keyed by property name.

    Raises:
        StaticValueError: If ``node`` (or any nested node) is not static.
    """

    kind = node_type(node)
    if kind == LITERAL:
        return literal_value(node)
    if kind == IDENTIFIER:
        return node.name
    if kind == ARRAY_EXPRESSION:
        return [node_to_value(element) for element in node.elements]
    if kind == OBJECT_EXPRESSION:
        result: dict[str, Any] = {}
        for prop in node.properties:
            key = property_key_name(prop)
            if key is None:
                raise StaticValueError(f"object member of type {node_type(prop)} has no static key")
            result[key] = node_to_value(prop.value)
        return result
    if kind == UNARY_EXPRESSION and node.operator in {"-", "+"}:
        operand = node_to_value(node.argument)
        if isinstance(operand, (int, float)) and not isinstance(operand, bool):
            return -operand if node.operator == "-" else operand
    raise StaticValueError(f"{kind or type(node).__name__} is not a static value")


__all__ = ["literal_value", "node_to_value", "property_key_name"]
