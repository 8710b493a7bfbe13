# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Merge configuration descriptions into object-expression nodes.

Two entry points exist. :func:`merge_object_into` only ever appends, so
calling it twice with overlapping keys yields duplicate properties.
:func:`merge_or_replace_object_into` works one level down inside a named
property and, in reassign mode, updates existing properties in place.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection
from typing import Any, Final

from esprima import nodes

from .coercion import coerce_scalar, create_identifier_or_literal, create_literal
from .config import MergeSettings, resolve_settings
from .description import (
    DescriptionValue,
    Fragment,
    MappingValue,
    PatternValue,
    ScalarValue,
    SequenceValue,
    dedupe_values,
    describe,
    describe_mapping,
)
from .errors import StaticValueError
from .serialization import canonical_key
from .toolkit.builders import (
    array_expression,
    clone_node,
    identifier,
    literal,
    object_expression,
    property_node,
)
from .toolkit.query import NodePath, require_type
from .toolkit.syntax import ARRAY_EXPRESSION, OBJECT_EXPRESSION
from .toolkit.values import node_to_value, property_key_name

LOGGER = logging.getLogger(__name__)

_IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_LEAF_VALUES: Final = (ScalarValue, PatternValue, Fragment)


def property_key(key: str) -> nodes.Node:
    """Return an identifier key, or a string literal when ``key`` is not a valid name."""

    return identifier(key) if _IDENTIFIER_RE.fullmatch(key) else literal(key)


def create_object_with_supplied_property(key: str, value: nodes.Node) -> nodes.Property:
    """Return the property ``key: value`` for an already built ``value`` node."""

    return property_node(property_key(key), value)


def create_property(key: str | int, value: Any) -> nodes.Property:
    """Return a property whose value keeps strings as quoted literals.

    Numeric and boolean keys become literal keys (``"1"`` gives ``1: ...``);
    other keys follow :func:`property_key`. The value goes through the literal
    rule, and sequences and mappings nest with the same rules.

    Args:
        key: Property name.
        value: Plain or described value.

    Returns:
        nodes.Property: Newly built ``key: value`` property.
    """

    coerced = coerce_scalar(str(key))
    key_node = property_key(coerced) if isinstance(coerced, str) else literal(coerced)
    return property_node(key_node, _literal_value_node(describe(value)))


def create_empty_array_property(key: str) -> nodes.Property:
    """Return the property ``key: []``."""

    return create_object_with_supplied_property(key, array_expression())


def create_array_with_children(
    key: str,
    items: Any,
    *,
    settings: MergeSettings | None = None,
) -> nodes.Property:
    """Return ``key: [...]`` with one element per item of ``items``.

    Scalars, patterns and fragments follow the identifier-or-literal rule,
    mappings become object literals filled by :func:`merge_object_into` and
    nested sequences become nested arrays.

    Raises:
        TypeError: If ``items`` is not a sequence.
    """

    sequence = describe(items)
    if not isinstance(sequence, SequenceValue):
        raise TypeError(f"expected a sequence for {key!r}, got {type(items).__name__}")
    prop = create_empty_array_property(key)
    prop.value.elements.extend(build_value_node(item, settings=settings) for item in sequence)
    return prop


def build_value_node(value: Any, *, settings: MergeSettings | None = None) -> nodes.Node:
    """Return the node a description value becomes when embedded on its own."""

    described = describe(value)
    if isinstance(described, _LEAF_VALUES):
        return create_identifier_or_literal(described)
    if isinstance(described, SequenceValue):
        return array_expression(build_value_node(item, settings=settings) for item in described)
    block = object_expression()
    _merge_entries(block, described, resolve_settings(settings))
    return block


def push_create_property(target: nodes.Node, key: str, value: Any) -> nodes.Property:
    """Append ``key: value`` to an object expression and return the property.

    ``value`` is embedded unchanged when it already is a node; otherwise it is
    converted with the identifier-or-literal rule.

    Raises:
        NodeShapeError: If ``target`` is not an object expression.
    """

    require_type(target, OBJECT_EXPRESSION)
    value_node = value if isinstance(value, nodes.Node) else create_identifier_or_literal(value)
    prop = create_object_with_supplied_property(key, value_node)
    target.properties.append(prop)
    return prop


def check_if_exists_and_add_value(target: nodes.Node, key: str, value: nodes.Node) -> nodes.Property:
    """Overwrite the value of every ``key`` property, or append one when absent.

    The first match receives ``value`` itself and later matches a copy of it.

    Args:
        target: Object expression to update.
        key: Property name to look for.
        value: Replacement value node.

    Returns:
        nodes.Property: The first updated property or the appended one.

    Raises:
        NodeShapeError: If ``target`` is not an object expression.
    """

    require_type(target, OBJECT_EXPRESSION)
    existing = properties_named(target, key)
    if not existing:
        return push_create_property(target, key, value)
    for position, prop in enumerate(existing):
        prop.value = value if position == 0 else clone_node(value)
    return existing[0]


def properties_named(target: nodes.Node, key: str) -> list[nodes.Property]:
    """Return the direct properties of an object expression named ``key``."""

    return [prop for prop in require_type(target, OBJECT_EXPRESSION).properties if property_key_name(prop) == key]


def find_obj_with_one_of_keys(obj: nodes.Node | NodePath, key_names: Collection[str]) -> bool:
    """Return ``True`` when the object literal defines any of ``key_names``."""

    target = obj.node if isinstance(obj, NodePath) else obj
    return any(property_key_name(prop) in key_names for prop in require_type(target, OBJECT_EXPRESSION).properties)


def merge_object_into(
    target: nodes.Node,
    description: Any,
    *,
    settings: MergeSettings | None = None,
) -> None:
    """Append properties for every key of ``description`` to ``target``.

    Keys containing the inject marker are appended as bare value members.
    Nothing is looked up beforehand: existing properties with the same key are
    left alone and the new ones are added next to them.

    Args:
        target: Object expression receiving the properties.
        description: Mapping (plain or described) to translate.
        settings: Optional settings providing the inject marker.

    Raises:
        NodeShapeError: If ``target`` is not an object expression.
        TypeError: If ``description`` is malformed.
    """

    require_type(target, OBJECT_EXPRESSION)
    _merge_entries(target, describe_mapping(description), resolve_settings(settings))


def merge_or_replace_object_into(
    target: nodes.Node,
    description: Any,
    name: str,
    *,
    reassign: bool = False,
    settings: MergeSettings | None = None,
) -> None:
    """Merge ``description`` into the object held by ``target``'s ``name`` property.

    Without ``reassign`` every key is appended as by :func:`merge_object_into`.
    With ``reassign`` scalar and inject keys overwrite existing properties,
    sequences are merged with the existing array and deduplicated, and nested
    mappings recurse into the existing nested object (created when missing).

    Args:
        target: Object expression containing the ``name`` property.
        description: Mapping (plain or described) to apply.
        name: Key of the property whose object value is updated.
        reassign: Update existing properties instead of appending.
        settings: Optional settings providing the inject marker.

    Raises:
        NodeShapeError: If ``target`` or the ``name`` property value is not an
            object expression, or a merged array property holds a non-array.
    """

    require_type(target, OBJECT_EXPRESSION)
    _push_object_keys(target, describe_mapping(description), name, reassign, resolve_settings(settings))


def _merge_entries(target: nodes.Node, mapping: MappingValue, settings: MergeSettings) -> None:
    for key, value in mapping:
        if settings.inject_marker in key:
            LOGGER.debug("Injecting bare member for %s", key)
            target.properties.append(build_value_node(value, settings=settings))
        elif isinstance(value, _LEAF_VALUES):
            target.properties.append(create_object_with_supplied_property(key, create_identifier_or_literal(value)))
        elif isinstance(value, SequenceValue):
            target.properties.append(create_array_with_children(key, value, settings=settings))
        else:
            block = object_expression()
            target.properties.append(create_object_with_supplied_property(key, block))
            _merge_entries(block, value, settings)


def _push_object_keys(
    parent: nodes.Node,
    mapping: MappingValue,
    name: str,
    reassign: bool,
    settings: MergeSettings,
) -> None:
    for prop in properties_named(parent, name):
        container = require_type(prop.value, OBJECT_EXPRESSION)
        for key, value in mapping:
            if settings.inject_marker in key:
                node = build_value_node(value, settings=settings)
                if reassign:
                    check_if_exists_and_add_value(container, key, node)
                else:
                    container.properties.append(node)
            elif isinstance(value, SequenceValue):
                if reassign:
                    _merge_array_property(container, key, value, settings)
                else:
                    container.properties.append(create_array_with_children(key, value, settings=settings))
            elif isinstance(value, _LEAF_VALUES):
                if reassign:
                    check_if_exists_and_add_value(container, key, create_identifier_or_literal(value))
                else:
                    push_create_property(container, key, create_identifier_or_literal(value))
            elif not reassign:
                block = push_create_property(container, key, object_expression()).value
                _merge_entries(block, value, settings)
            else:
                if not properties_named(container, key):
                    LOGGER.debug("Creating nested object for %s.%s", name, key)
                    push_create_property(container, key, object_expression())
                _push_object_keys(container, value, key, reassign, settings)


def _merge_array_property(
    container: nodes.Node,
    key: str,
    sequence: SequenceValue,
    settings: MergeSettings,
) -> None:
    existing = properties_named(container, key)
    if not existing:
        LOGGER.debug("No array named %s to merge into; creating it", key)
        container.properties.append(create_array_with_children(key, sequence, settings=settings))
        return
    for prop in existing:
        array = require_type(prop.value, ARRAY_EXPRESSION)
        incoming = [build_value_node(item, settings=settings) for item in sequence]
        merged = dedupe_values([*array.elements, *incoming], key=element_identity)
        LOGGER.debug("Merged %s: %d existing + %d new -> %d", key, len(array.elements), len(incoming), len(merged))
        array.elements = merged


def element_identity(element: nodes.Node | None) -> str:
    """Return the dedupe identity of an array element.

    Static elements compare by their read-back value, so ``'a'`` and ``a``
    match the description string ``"a"``; other elements compare by structure.
    """

    try:
        return canonical_key(node_to_value(element))
    except StaticValueError:
        return canonical_key(element)


def _literal_value_node(value: DescriptionValue) -> nodes.Node:
    if isinstance(value, SequenceValue):
        return array_expression(_literal_value_node(item) for item in value)
    if isinstance(value, MappingValue):
        return object_expression(create_property(key, item) for key, item in value)
    return create_literal(value)


__all__ = [
    "build_value_node",
    "check_if_exists_and_add_value",
    "create_array_with_children",
    "create_empty_array_property",
    "create_object_with_supplied_property",
    "create_property",
    "element_identity",
    "find_obj_with_one_of_keys",
    "merge_object_into",
    "merge_or_replace_object_into",
    "properties_named",
    "property_key",
    "push_create_property",
]
