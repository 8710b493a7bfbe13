# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, input loading)."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from ..config import MergeSettings, load_settings
from ..errors import AstMergeError
from ..logging import fail as core_fail
from ..logging import warn as core_warn
from ..toolkit.query import find_config_object, parse_script


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, console=self.console)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, console=self.console)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` writing status lines to stderr.

    Args:
        emoji: Whether log output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(stderr=True, no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji)


def load_program(path: Path) -> Any:
    """Read and parse the JavaScript file at ``path``.

    Raises:
        CLIError: If the file cannot be read or parsed.
    """

    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    try:
        return parse_script(source)
    except AstMergeError as exc:
        raise CLIError(f"Cannot parse {path}: {exc}") from exc


def load_config_object(path: Path) -> Any:
    """Return the configuration object literal declared in ``path``."""

    program = load_program(path)
    try:
        return find_config_object(program)
    except AstMergeError as exc:
        raise CLIError(f"No configuration object found in {path}: {exc}") from exc


def load_mapping(value: str, *, label: str) -> Mapping[str, Any]:
    """Decode a JSON object given inline or as a path to a ``.json`` file.

    Args:
        value: Inline JSON text or a filesystem path.
        label: Option name used in error messages.

    Returns:
        Mapping[str, Any]: Decoded JSON object, key order preserved.

    Raises:
        CLIError: If the payload is not valid JSON or not an object.
    """

    candidate = Path(value)
    text = value
    if not value.lstrip().startswith("{") and candidate.is_file():
        text = candidate.read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CLIError(f"{label} is not valid JSON: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise CLIError(f"{label} must be a JSON object")
    return payload


def load_cli_settings(root: Path) -> MergeSettings:
    """Load settings for ``root`` translating configuration errors."""

    try:
        return load_settings(root)
    except AstMergeError as exc:
        raise CLIError(str(exc)) from exc


__all__ = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "load_cli_settings",
    "load_config_object",
    "load_mapping",
    "load_program",
]
