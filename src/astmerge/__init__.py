# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build and merge ESTree fragments for build-tool configuration files."""

from __future__ import annotations

from importlib import metadata

from .description import Fragment, describe
from .errors import AstMergeError, NodeShapeError, StaticValueError
from .merger import merge_object_into, merge_or_replace_object_into
from .plugins import upsert_plugin_call

__all__ = [
    "AstMergeError",
    "Fragment",
    "NodeShapeError",
    "StaticValueError",
    "__version__",
    "describe",
    "merge_object_into",
    "merge_or_replace_object_into",
    "upsert_plugin_call",
]

try:
    __version__ = metadata.version("astmerge")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
