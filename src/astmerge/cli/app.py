# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from .merge import add_plugin_command, merge_command
from .plugins import plugins_command

app = typer.Typer(
    help="Merge configuration descriptions into JavaScript build configuration ASTs.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log merge decisions to stderr.")] = False,
) -> None:
    """Configure library logging before a command runs."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


app.command("plugins")(plugins_command)
app.command("merge")(merge_command)
app.command("add-plugin")(add_plugin_command)

__all__ = ["app"]
