# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn scalar description values into literal or identifier nodes.

Strings are coerced before they are embedded: ``"true"``/``"false"`` become
booleans and numeric strings become numbers. What happens to any other string
depends on the caller: :func:`create_literal` keeps it as a quoted string while
:func:`create_identifier_or_literal` emits a bare identifier so generated code
can reference variables and pre-quoted source text.
"""

from __future__ import annotations

import re
from typing import Any, Final

from esprima import nodes

from .description import (
    DescriptionValue,
    Fragment,
    PatternValue,
    ScalarType,
    ScalarValue,
    describe,
)
from .toolkit.builders import identifier, literal, regex_literal
from .toolkit.query import safe_traverse

_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX_RE: Final[re.Pattern[str]] = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_BOOLEAN_LITERALS: Final[dict[str, bool]] = {"true": True, "false": False}


def coerce_scalar(value: ScalarType) -> ScalarType:
    """Return the primitive a string spells, or ``value`` unchanged.

    Args:
        value: Scalar from a configuration description.

    Returns:
        ScalarType: ``True``/``False`` for ``"true"``/``"false"``, an ``int`` or
        ``float`` for strings that fully parse as a number, otherwise ``value``.
    """

    if not isinstance(value, str):
        return value
    if value in _BOOLEAN_LITERALS:
        return _BOOLEAN_LITERALS[value]
    text = value.strip()
    if _RADIX_RE.fullmatch(text):
        return int(text, 0)
    if _DECIMAL_RE.fullmatch(text):
        if any(marker in text for marker in ".eE"):
            return float(text)
        return int(text)
    return value


def create_literal(value: Any) -> nodes.Node:
    """Return a literal node for a scalar, pattern or fragment value.

    Non-coercible strings stay string literals.

    Raises:
        TypeError: If ``value`` is a sequence or mapping.
    """

    described = describe(value)
    if isinstance(described, ScalarValue):
        return literal(coerce_scalar(described.value))
    return _create_special(described)


def create_identifier_or_literal(value: Any) -> nodes.Node:
    """Return a literal node, or an identifier for non-coercible strings.

    Raises:
        TypeError: If ``value`` is a sequence or mapping.
    """

    described = describe(value)
    if isinstance(described, ScalarValue):
        coerced = coerce_scalar(described.value)
        if isinstance(coerced, str):
            return identifier(coerced)
        return literal(coerced)
    return _create_special(described)


def create_external_regexp(fragment: Fragment) -> nodes.Node:
    """Re-emit a parsed regular expression fragment as a fresh regex literal."""

    pattern = safe_traverse(fragment.node, ("regex", "pattern"))
    if pattern is None:
        raise TypeError("fragment does not hold a regular expression literal")
    return regex_literal(pattern, safe_traverse(fragment.node, ("regex", "flags")) or "")


def _create_special(described: DescriptionValue) -> nodes.Node:
    if isinstance(described, PatternValue):
        return regex_literal(described.source, described.flags)
    if isinstance(described, Fragment):
        return create_external_regexp(described) if described.is_regex else described.node
    raise TypeError(f"{type(described).__name__} cannot be embedded as a single value node")


__all__ = [
    "coerce_scalar",
    "create_external_regexp",
    "create_identifier_or_literal",
    "create_literal",
]
