# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsing entry points and structural queries over esprima trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import esprima
from esprima import nodes
from esprima.error_handler import Error as EsprimaError

from ..errors import NodeShapeError, SourceParseError
from .syntax import (
    ASSIGNMENT_EXPRESSION,
    EXPRESSION_STATEMENT,
    OBJECT_EXPRESSION,
    VARIABLE_DECLARATION,
)

Node = nodes.Node
NodePredicate = Callable[["NodePath"], bool]


@dataclass(frozen=True, slots=True)
class NodePath:
    """A node together with the path that leads to it from the search root.

    Attributes:
        node: The esprima node itself.
        parent: Path of the enclosing node, ``None`` for the search root.
        field: Attribute of ``parent.node`` holding this node.
        index: Position inside ``field`` when the attribute is a list.
    """

    node: Node
    parent: NodePath | None = None
    field: str | None = None
    index: int | None = None

    @property
    def type(self) -> str | None:
        """Return the ESTree type of the wrapped node."""

        return node_type(self.node)

    def replace(self, replacement: Node) -> None:
        """Swap the wrapped node for ``replacement`` inside its parent."""

        if self.parent is None or self.field is None:
            raise ValueError("cannot replace the root of a search")
        container = getattr(self.parent.node, self.field)
        if self.index is None:
            setattr(self.parent.node, self.field, replacement)
        else:
            container[self.index] = replacement


def node_type(node: object) -> str | None:
    """Return the ``type`` attribute of ``node`` or ``None`` for non-nodes."""

    if not isinstance(node, Node):
        return None
    value = vars(node).get("type")
    return value if isinstance(value, str) else None


def is_type(node: object, expected: str) -> bool:
    """Return ``True`` when ``node`` is an ESTree node of type ``expected``."""

    target = node.node if isinstance(node, NodePath) else node
    return node_type(target) == expected


def safe_traverse(obj: object, path: Sequence[str]) -> Any:
    """Follow ``path`` through attributes or mapping keys of ``obj``.

    Args:
        obj: Starting object, usually an esprima node.
        path: Attribute names to follow in order.

    Returns:
        Any: Value found at the end of ``path`` or ``None`` when any step is missing.
    """

    value: Any = obj
    for segment in path:
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(segment)
        else:
            value = getattr(value, segment, None)
    return value


def iter_children(node: Node) -> Iterator[tuple[str, int | None, Node]]:
    """Yield ``(field, index, child)`` for every direct child node of ``node``."""

    for field, value in vars(node).items():
        if isinstance(value, Node):
            yield field, None, value
        elif isinstance(value, list):
            for index, item in enumerate(value):
                if isinstance(item, Node):
                    yield field, index, item


def walk(root: Node | NodePath) -> Iterator[NodePath]:
    """Visit ``root`` and all descendant nodes in depth-first, source order.

    Args:
        root: Node (or existing path) at which traversal starts.

    Returns:
        Iterator[NodePath]: Paths for the root and every descendant node.
    """

    start = root if isinstance(root, NodePath) else NodePath(root)
    stack: list[NodePath] = [start]
    while stack:
        current = stack.pop()
        yield current
        children = [
            NodePath(child, current, field, index) for field, index, child in iter_children(current.node)
        ]
        stack.extend(reversed(children))


def matches_shape(value: object, shape: object) -> bool:
    """Return ``True`` when ``value`` structurally contains ``shape``.

    Mappings in ``shape`` are matched attribute by attribute against nodes (or
    mapping keys); every other value is compared with ``==``.
    """

    if isinstance(shape, Mapping):
        if value is None:
            return False
        return all(matches_shape(safe_traverse(value, (key,)), expected) for key, expected in shape.items())
    return bool(value == shape)


def find(
    root: Node | NodePath,
    kind: str,
    shape: Mapping[str, object] | None = None,
    *,
    predicate: NodePredicate | None = None,
) -> list[NodePath]:
    """Return paths to descendants of ``root`` with ESTree type ``kind``.

    Args:
        root: Node under which to search; ``root`` itself is included.
        kind: ESTree node type to collect.
        shape: Optional nested attribute shape every match must contain.
        predicate: Optional extra filter applied to each candidate path.

    Returns:
        list[NodePath]: Matches in source order.
    """

    matches: list[NodePath] = []
    for path in walk(root):
        if path.type != kind:
            continue
        if shape is not None and not matches_shape(path.node, shape):
            continue
        if predicate is not None and not predicate(path):
            continue
        matches.append(path)
    return matches


def find_nodes(root: Node | NodePath, kind: str, shape: Mapping[str, object] | None = None) -> list[Node]:
    """Return the nodes (rather than paths) matched by :func:`find`."""

    return [path.node for path in find(root, kind, shape)]


def parse_script(source: str) -> nodes.Node:
    """Parse ``source`` as a script and return the ``Program`` node.

    Raises:
        SourceParseError: If esprima rejects ``source``.
    """

    try:
        return esprima.parseScript(source)
    except EsprimaError as exc:
        raise SourceParseError(str(exc)) from exc


def parse_expression(source: str) -> Node:
    """Parse ``source`` as a single expression and return the expression node.

    Raises:
        ValueError: If ``source`` is not a lone expression statement.
    """

    program = parse_script(source)
    body = vars(program).get("body") or []
    if len(body) != 1 or node_type(body[0]) != EXPRESSION_STATEMENT:
        raise ValueError(f"expected a single expression, got {source!r}")
    return body[0].expression


def find_config_object(program: Node) -> Node:
    """Locate the configuration object literal of a parsed config file.

    ``module.exports = {...}`` (or any assignment of an object literal) wins;
    otherwise the first ``const x = {...}`` declaration is used.

    Raises:
        NodeShapeError: If the program declares no object literal at all.
    """

    for path in find(program, ASSIGNMENT_EXPRESSION):
        right = vars(path.node).get("right")
        if node_type(right) == OBJECT_EXPRESSION:
            return right
    for path in find(program, VARIABLE_DECLARATION):
        for declarator in vars(path.node).get("declarations") or []:
            init = vars(declarator).get("init")
            if node_type(init) == OBJECT_EXPRESSION:
                return init
    raise NodeShapeError(OBJECT_EXPRESSION, program)


def require_type(node: object, expected: str) -> Node:
    """Return ``node`` unchanged, raising :class:`NodeShapeError` on a type mismatch."""

    if node_type(node) != expected:
        raise NodeShapeError(expected, node)
    return node  # type: ignore[return-value]


__all__ = [
    "NodePath",
    "find",
    "find_config_object",
    "find_nodes",
    "is_type",
    "iter_children",
    "matches_shape",
    "node_type",
    "parse_expression",
    "parse_script",
    "require_type",
    "safe_traverse",
    "walk",
]
