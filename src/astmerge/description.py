# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tagged representation of plain configuration descriptions.

Callers hand the merger ordinary nested dicts and lists. :func:`describe`
classifies such input once, up front, into one of five variants so the merge
code dispatches on an explicit tag instead of re-inspecting raw values at every
level of recursion.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Hashable, Iterable, Iterator
from collections.abc import Mapping as AbstractMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from esprima import nodes

from .serialization import canonical_key
from .toolkit.builders import python_flags_to_js
from .toolkit.query import parse_expression, safe_traverse

ScalarType: TypeAlias = str | int | float | bool | None


@dataclass(frozen=True, slots=True)
class ScalarValue:
    """A primitive string, number, boolean or ``null``."""

    value: ScalarType


@dataclass(frozen=True, slots=True)
class PatternValue:
    """A regular expression stored as a pattern literal."""

    pattern: re.Pattern[str]

    @property
    def source(self) -> str:
        """Return the expression body without delimiters."""

        return self.pattern.pattern

    @property
    def flags(self) -> str:
        """Return the equivalent JavaScript flag letters."""

        return python_flags_to_js(self.pattern.flags)


@dataclass(frozen=True, slots=True)
class SequenceValue:
    """An ordered list of described values; becomes an array literal."""

    items: tuple[DescriptionValue, ...]

    def __iter__(self) -> Iterator[DescriptionValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class MappingValue:
    """Ordered ``key -> value`` entries; becomes an object literal."""

    entries: tuple[tuple[str, DescriptionValue], ...]

    def __iter__(self) -> Iterator[tuple[str, DescriptionValue]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        """Return the keys in description order."""

        return [key for key, _ in self.entries]


@dataclass(frozen=True, slots=True, eq=False)
class Fragment:
    """An already parsed esprima node embedded as-is.

    Attributes:
        node: Expression node produced by esprima or the node builders.
    """

    node: nodes.Node

    @classmethod
    def parse(cls, source: str) -> Fragment:
        """Parse ``source`` (e.g. ``"/\\.jsx?$/"``) into a fragment."""

        return cls(parse_expression(source))

    @property
    def is_regex(self) -> bool:
        """Return ``True`` when the fragment is a regular expression literal."""

        return safe_traverse(self.node, ("regex", "pattern")) is not None


DescriptionValue: TypeAlias = ScalarValue | PatternValue | SequenceValue | MappingValue | Fragment

_VARIANTS = (ScalarValue, PatternValue, SequenceValue, MappingValue, Fragment)


def describe(value: Any) -> DescriptionValue:
    """Classify a plain configuration value into its tagged variant.

    Args:
        value: Primitive, compiled regex, list/tuple, mapping, esprima node or an
            already tagged value.

    Returns:
        DescriptionValue: Tagged representation of ``value`` (recursively).

    Raises:
        TypeError: If ``value`` (or a nested value or key) has no variant.
    """

    if isinstance(value, _VARIANTS):
        return value
    if isinstance(value, nodes.Node):
        return Fragment(value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return ScalarValue(value)
    if isinstance(value, re.Pattern):
        return PatternValue(value)
    if isinstance(value, AbstractMapping):
        entries: list[tuple[str, DescriptionValue]] = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"configuration keys must be strings, got {type(key).__name__}")
            entries.append((key, describe(item)))
        return MappingValue(tuple(entries))
    if isinstance(value, (list, tuple)):
        return SequenceValue(tuple(describe(item) for item in value))
    raise TypeError(f"unsupported configuration value of type {type(value).__name__}")


def describe_mapping(value: Any) -> MappingValue:
    """Return ``value`` described as a mapping or raise ``TypeError``."""

    described = describe(value)
    if not isinstance(described, MappingValue):
        raise TypeError(f"expected a mapping description, got {type(value).__name__}")
    return described


def dedupe_values(values: Iterable[Any], *, key: Callable[[Any], Hashable] = canonical_key) -> list[Any]:
    """Drop repeated values keeping the first occurrence of each.

    Args:
        values: Candidate values in priority order.
        key: Function mapping a value to its identity; defaults to structural
            equality of primitives, lists, dicts, regexes and nodes.

    Returns:
        list[Any]: Values in first-occurrence order without duplicates.
    """

    seen: set[Hashable] = set()
    unique: list[Any] = []
    for value in values:
        identity = key(value)
        if identity in seen:
            continue
        seen.add(identity)
        unique.append(value)
    return unique


__all__ = [
    "DescriptionValue",
    "Fragment",
    "MappingValue",
    "PatternValue",
    "ScalarValue",
    "SequenceValue",
    "dedupe_values",
    "describe",
    "describe_mapping",
]
