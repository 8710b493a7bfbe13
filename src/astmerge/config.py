# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings shared by merge operations and their loaders."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, MutableMapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "astmerge"
ENV_PREFIX: Final[str] = "ASTMERGE_"

DeclarationKind = Literal["const", "let", "var"]


class MergeSettings(BaseModel):
    """Tunable names and markers used while generating nodes.

    Attributes:
        inject_marker: Substring flagging a description key whose value is
            embedded as a bare member instead of a ``key: value`` property.
        require_callee: Function name recognised as a module import call.
        declaration_kind: Keyword used for generated variable declarations.
        argument_placeholder: Text of the literal placed in generated calls.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    inject_marker: str = Field(default="inject", min_length=1)
    require_callee: str = Field(default="require", min_length=1)
    declaration_kind: DeclarationKind = "const"
    argument_placeholder: str = "/* Add your arguments here */"

    @field_validator("require_callee")
    @classmethod
    def _validate_callee(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"{value!r} is not a valid identifier")
        return value


DEFAULT_SETTINGS: Final[MergeSettings] = MergeSettings()


def resolve_settings(settings: MergeSettings | None) -> MergeSettings:
    """Return ``settings`` or the module defaults when ``None``."""

    return DEFAULT_SETTINGS if settings is None else settings


def load_settings(root: Path | None = None, *, env: Mapping[str, str] | None = None) -> MergeSettings:
    """Load settings from ``[tool.astmerge]`` and ``ASTMERGE_*`` variables.

    Args:
        root: Directory holding ``pyproject.toml``; the current directory when
            omitted. A missing file yields the defaults.
        env: Environment mapping consulted for overrides (``os.environ``).

    Returns:
        MergeSettings: Validated settings; environment values win over the file.

    Raises:
        ConfigError: If the file cannot be parsed or values fail validation.
    """

    directory = root or Path.cwd()
    payload: dict[str, Any] = dict(_read_pyproject_section(directory / PYPROJECT_FILENAME))
    environment = os.environ if env is None else env
    for field_name in MergeSettings.model_fields:
        override = environment.get(f"{ENV_PREFIX}{field_name.upper()}")
        if override is not None:
            payload[field_name] = override
    try:
        return MergeSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid astmerge settings: {exc}") from exc


def _read_pyproject_section(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    return _load_section_cached(path.resolve(), path.stat().st_mtime_ns)


@lru_cache(maxsize=8)
def _load_section_cached(path: Path, _mtime_ns: int) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    section = document.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY, {})
    if not isinstance(section, MutableMapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return dict(section)


__all__ = [
    "DEFAULT_SETTINGS",
    "DeclarationKind",
    "MergeSettings",
    "load_settings",
    "resolve_settings",
]
