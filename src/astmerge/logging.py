# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool, console: Console | None) -> None:
    target = console or Console(stderr=True, highlight=False, emoji=use_emoji)
    text = Text(msg)
    if target.is_terminal:
        text.stylize(style)
    target.print(text)


def warn(msg: str, *, use_emoji: bool, console: Console | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, console=console)


def fail(msg: str, *, use_emoji: bool, console: Console | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="bold red", use_emoji=use_emoji, console=console)


__all__ = ["emoji", "fail", "warn"]
