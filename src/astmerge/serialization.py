# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for converting esprima trees to JSON-friendly data."""

from __future__ import annotations

import json
import math
import re
from typing import Any, TypeAlias

JsonPrimitive: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonPrimitive | list["JsonValue"] | dict[str, "JsonValue"]


def to_estree_dict(value: Any) -> JsonValue:
    """Convert an esprima node (or nested structure) into plain ESTree data.

    Compiled patterns stored on regex literals serialise as ``null``; the
    ``regex`` member carries the pattern, as in ESTree JSON.
    """

    if isinstance(value, re.Pattern):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [to_estree_dict(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_estree_dict(item) for key, item in value.items()}
    if hasattr(value, "__dict__"):
        return {str(key): to_estree_dict(item) for key, item in vars(value).items()}
    return str(value)


def dumps_estree(node: Any, *, indent: int | None = 2) -> str:
    """Serialise ``node`` to an ESTree JSON document."""

    return json.dumps(to_estree_dict(node), indent=indent)


def canonical_key(value: Any) -> str:
    """Return a stable string used to compare values structurally.

    Integral floats compare equal to ints and regular expressions compare by
    pattern and flags, mirroring JavaScript value semantics.
    """

    return json.dumps(_canonical(value), sort_keys=True, default=repr)


def _canonical(value: Any) -> Any:
    if isinstance(value, re.Pattern):
        return {"$regex": value.pattern, "$flags": value.flags}
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_canonical(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _canonical(item) for key, item in value.items()}
    return to_estree_dict(value)


__all__ = ["JsonValue", "canonical_key", "dumps_estree", "to_estree_dict"]
