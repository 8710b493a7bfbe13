# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""List plugin constructor calls declared in a configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ..plugins import member_expression_to_path_string
from ..toolkit.query import find
from ..toolkit.syntax import NEW_EXPRESSION
from .shared import CLIError, build_cli_logger, load_program


def run_plugins(path: Path, *, console: Console | None = None) -> int:
    """Render a table of ``new X.Y(...)`` expressions found in ``path``.

    Args:
        path: JavaScript configuration file to inspect.
        console: Optional ``rich`` console for output rendering.

    Returns:
        int: ``0`` on success, the error's exit code otherwise.
    """

    logger = build_cli_logger(emoji=True)
    output = console or Console()
    try:
        program = load_program(path)
    except CLIError as exc:
        logger.fail(str(exc))
        return exc.exit_code

    table = Table(title=f"Plugins in {path.name}")
    table.add_column("Plugin", style="cyan")
    table.add_column("Arguments", justify="right")
    rows = 0
    for match in find(program, NEW_EXPRESSION):
        name = member_expression_to_path_string(match.node.callee)
        if name is None:
            continue
        table.add_row(name, str(len(match.node.arguments or [])))
        rows += 1
    if rows:
        output.print(table)
    else:
        logger.warn(f"No plugin constructor calls found in {path}")
    return 0


def plugins_command(
    path: Annotated[Path, typer.Argument(help="JavaScript configuration file.")],
) -> None:
    """Typer entry point mirroring :func:`run_plugins`."""

    raise typer.Exit(code=run_plugins(path))


__all__ = ["plugins_command", "run_plugins"]
