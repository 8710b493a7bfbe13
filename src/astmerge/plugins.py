# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Find, create and update ``new name.space.Plugin(...)`` declarations."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from functools import reduce
from typing import Any

from esprima import nodes

from .config import MergeSettings, resolve_settings
from .description import MappingValue, describe_mapping
from .errors import NodeShapeError
from .merger import create_property
from .toolkit.builders import clone_node, identifier, member_expression, new_expression, object_expression
from .toolkit.query import NodePath, find, find_nodes, node_type, require_type, safe_traverse
from .toolkit.syntax import (
    ARRAY_EXPRESSION,
    CALL_EXPRESSION,
    IDENTIFIER,
    LITERAL,
    MEMBER_EXPRESSION,
    NEW_EXPRESSION,
    OBJECT_EXPRESSION,
    PROPERTY,
    VARIABLE_DECLARATOR,
)
from .toolkit.values import property_key_name

LOGGER = logging.getLogger(__name__)


def member_expression_to_path_string(node: nodes.Node | None) -> str | None:
    """Return the dotted name spelled by nested member expressions.

    ``webpack.optimize.DedupePlugin`` is returned for the callee of
    ``new webpack.optimize.DedupePlugin()``; ``None`` for anything that is not
    an identifier chain.
    """

    kind = node_type(node)
    if kind == IDENTIFIER:
        return node.name
    if kind == MEMBER_EXPRESSION and not safe_traverse(node, ("computed",)):
        head = member_expression_to_path_string(node.object)
        tail = safe_traverse(node, ("property", "name"))
        if head is None or tail is None:
            return None
        return f"{head}.{tail}"
    return None


def path_to_member_expression(name: str | Sequence[str]) -> nodes.Node | None:
    """Build the identifier / member-expression chain for a dotted name.

    Args:
        name: Dotted string (``"a.b.C"``) or its segments.

    Returns:
        nodes.Node | None: ``a.b.C`` as nested member expressions, a bare
        identifier for one segment, ``None`` for no segments.
    """

    segments = [segment for segment in (name.split(".") if isinstance(name, str) else name) if segment]
    if not segments:
        return None
    return reduce(
        lambda obj, segment: member_expression(obj, identifier(segment)),
        segments[1:],
        identifier(segments[0]),
    )


def find_plugins_by_name(root: nodes.Node | NodePath, plugin_names: Collection[str]) -> list[NodePath]:
    """Return ``new X()`` expressions under ``root`` whose callee is one of ``plugin_names``."""

    return find(
        root,
        NEW_EXPRESSION,
        predicate=lambda path: member_expression_to_path_string(path.node.callee) in plugin_names,
    )


def find_root_nodes_by_name(root: nodes.Node | NodePath, prop_name: str) -> list[NodePath]:
    """Return every ``prop_name: ...`` property under ``root``."""

    return find(root, PROPERTY, {"key": {"name": prop_name}})


def upsert_plugin_call(
    plugins_array: nodes.Node,
    dotted_name: str,
    options: Any = None,
) -> nodes.Node:
    """Create or update the ``new dotted_name(options)`` element of a plugins array.

    Existing calls with the same dotted callee are updated in place: a call
    without arguments receives an options object, a call with an options object
    gets a shallow merge where matching keys have their value replaced. When no
    call exists one is appended. Option values keep strings as quoted literals
    after the usual boolean/number coercion.

    Args:
        plugins_array: ``ArrayExpression`` holding plugin instances.
        dotted_name: Callee name such as ``webpack.optimize.DedupePlugin``.
        options: Mapping of plugin options; ``None`` leaves arguments untouched.

    Returns:
        nodes.Node: The created call, or the first matching call that was updated.

    Raises:
        NodeShapeError: If ``plugins_array`` is not an array expression, or an
            existing call's arguments contain no options object to merge into.
        TypeError: If ``options`` is not a mapping.
    """

    require_type(plugins_array, ARRAY_EXPRESSION)
    mapping = None if options is None else describe_mapping(options)
    matches = [
        element
        for element in plugins_array.elements
        if node_type(element) == NEW_EXPRESSION and member_expression_to_path_string(element.callee) == dotted_name
    ]
    if matches:
        if mapping is not None:
            for call in matches:
                _merge_call_options(call, mapping, dotted_name)
        return matches[0]

    arguments = [] if mapping is None else [object_expression(create_property(key, value) for key, value in mapping)]
    call = new_expression(path_to_member_expression(dotted_name), arguments)
    LOGGER.debug("Appending new %s with %d argument(s)", dotted_name, len(arguments))
    plugins_array.elements.append(call)
    return call


def _merge_call_options(call: nodes.Node, mapping: MappingValue, dotted_name: str) -> None:
    arguments = call.arguments
    if not arguments:
        LOGGER.debug("Attaching options to argument-less %s", dotted_name)
        arguments.append(object_expression(create_property(key, value) for key, value in mapping))
        return
    options_node = next((arg for arg in arguments if node_type(arg) == OBJECT_EXPRESSION), None)
    if options_node is None:
        raise NodeShapeError(OBJECT_EXPRESSION, arguments[0])
    for key, value in mapping:
        new_prop = create_property(key, value)
        name = property_key_name(new_prop)
        existing = [prop for prop in options_node.properties if property_key_name(prop) == name]
        if existing:
            LOGGER.debug("Replacing %s option %s", dotted_name, name)
            for position, prop in enumerate(existing):
                prop.value = new_prop.value if position == 0 else clone_node(new_prop.value)
        else:
            options_node.properties.append(new_prop)


def find_variable_to_plugin(
    root: nodes.Node | NodePath,
    package_name: str,
    *,
    settings: MergeSettings | None = None,
) -> str | None:
    """Return the variable bound to ``require(package_name)`` under ``root``.

    Args:
        root: Program or subtree to search.
        package_name: Module specifier, e.g. ``"extract-text-webpack-plugin"``.
        settings: Optional settings naming the import function.

    Returns:
        str | None: Name of the last matching declarator, ``None`` when absent.
    """

    callee = resolve_settings(settings).require_callee
    declarators = find_nodes(
        root,
        VARIABLE_DECLARATOR,
        {"init": {"type": CALL_EXPRESSION, "callee": {"type": IDENTIFIER, "name": callee}}},
    )
    names = [
        declarator.id.name
        for declarator in declarators
        if node_type(declarator.id) == IDENTIFIER and _first_argument_is(declarator.init, package_name)
    ]
    return names[-1] if names else None


def _first_argument_is(call: nodes.Node, value: str) -> bool:
    arguments = call.arguments or []
    return bool(arguments) and node_type(arguments[0]) == LITERAL and arguments[0].value == value


__all__ = [
    "find_plugins_by_name",
    "find_root_nodes_by_name",
    "find_variable_to_plugin",
    "member_expression_to_path_string",
    "path_to_member_expression",
    "upsert_plugin_call",
]
