# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Node constructors delegating to :mod:`esprima.nodes`.

Every helper returns a fresh esprima node so callers can attach it anywhere in
an existing tree. ``raw`` source text for literals is computed here because
esprima only fills it in while parsing.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable
from typing import Final, TypeAlias, TypeVar

from esprima import nodes

from .syntax import PROPERTY_KIND_INIT

Node: TypeAlias = nodes.Node
LiteralValue: TypeAlias = str | int | float | bool | None
_T = TypeVar("_T")

_JS_REGEX_FLAGS: Final[dict[str, re.RegexFlag]] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}


def literal_raw(value: LiteralValue) -> str:
    """Return the JavaScript source text for a primitive ``value``.

    Args:
        value: Primitive literal value.

    Returns:
        str: Source spelling, e.g. ``"true"``, ``"null"`` or a quoted string.
    """

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return repr(value)


def identifier(name: str) -> nodes.Identifier:
    """Return an ``Identifier`` node for ``name``."""

    return nodes.Identifier(name)


def literal(value: LiteralValue) -> nodes.Literal:
    """Return a ``Literal`` node holding ``value`` verbatim (no coercion)."""

    return nodes.Literal(value, literal_raw(value))


def regex_literal(pattern: str, flags: str = "") -> nodes.RegexLiteral:
    """Return a regular-expression ``Literal`` node ``/pattern/flags``.

    The node's ``value`` is the equivalent compiled Python pattern when the
    source compiles with :mod:`re`, otherwise ``None``.

    Args:
        pattern: Regular expression body without delimiters.
        flags: JavaScript flag letters (``g``, ``i``, ``m`` ...).

    Returns:
        nodes.RegexLiteral: Literal node carrying ``regex.pattern``/``regex.flags``.
    """

    py_flags = 0
    for flag in flags:
        py_flags |= _JS_REGEX_FLAGS.get(flag, 0)
    try:
        compiled: re.Pattern[str] | None = re.compile(pattern, py_flags)
    except re.error:
        compiled = None
    return nodes.RegexLiteral(compiled, f"/{pattern}/{flags}", pattern, flags)


def python_flags_to_js(flags: int) -> str:
    """Translate :mod:`re` flags into JavaScript regex flag letters."""

    return "".join(letter for letter, flag in _JS_REGEX_FLAGS.items() if flags & flag)


def property_node(key: Node, value: Node) -> nodes.Property:
    """Return an ``init`` ``Property`` node ``key: value``."""

    return nodes.Property(PROPERTY_KIND_INIT, key, False, value, False, False)


def object_expression(properties: Iterable[Node] = ()) -> nodes.ObjectExpression:
    """Return an ``ObjectExpression`` with a mutable copy of ``properties``."""

    return nodes.ObjectExpression(list(properties))


def array_expression(elements: Iterable[Node] = ()) -> nodes.ArrayExpression:
    """Return an ``ArrayExpression`` with a mutable copy of ``elements``."""

    return nodes.ArrayExpression(list(elements))


def call_expression(callee: Node, arguments: Iterable[Node] = ()) -> nodes.CallExpression:
    """Return a ``CallExpression`` ``callee(...arguments)``."""

    return nodes.CallExpression(callee, list(arguments))


def new_expression(callee: Node, arguments: Iterable[Node] = ()) -> nodes.NewExpression:
    """Return a ``NewExpression`` ``new callee(...arguments)``."""

    return nodes.NewExpression(callee, list(arguments))


def member_expression(obj: Node, prop: Node) -> nodes.StaticMemberExpression:
    """Return a non-computed ``MemberExpression`` ``obj.prop``."""

    return nodes.StaticMemberExpression(obj, prop)


def variable_declarator(ident: Node, init: Node | None) -> nodes.VariableDeclarator:
    """Return a ``VariableDeclarator`` binding ``ident`` to ``init``."""

    return nodes.VariableDeclarator(ident, init)


def variable_declaration(kind: str, declarators: Iterable[Node]) -> nodes.VariableDeclaration:
    """Return a ``VariableDeclaration`` of ``kind`` (``const``/``let``/``var``)."""

    return nodes.VariableDeclaration(list(declarators), kind)


def clone_node(value: _T) -> _T:
    """Return a structural copy of a node tree so it can be attached elsewhere.

    Nodes and the plain esprima objects they hold (such as ``regex``) are copied
    attribute by attribute; primitives and compiled patterns are shared.
    """

    if isinstance(value, list):
        return [clone_node(item) for item in value]  # type: ignore[return-value]
    if isinstance(value, dict):
        return {key: clone_node(item) for key, item in value.items()}  # type: ignore[return-value]
    if value is None or isinstance(value, (str, int, float, bool, re.Pattern)):
        return value
    copied = object.__new__(type(value))
    vars(copied).update({key: clone_node(item) for key, item in vars(value).items()})
    return copied


__all__ = [
    "LiteralValue",
    "Node",
    "array_expression",
    "call_expression",
    "clone_node",
    "identifier",
    "literal",
    "literal_raw",
    "member_expression",
    "new_expression",
    "object_expression",
    "property_node",
    "python_flags_to_js",
    "regex_literal",
    "variable_declaration",
    "variable_declarator",
]
