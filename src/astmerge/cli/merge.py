# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Commands applying descriptions and plugin options to configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer
from esprima import nodes

from ..errors import AstMergeError
from ..merger import create_empty_array_property, merge_object_into, merge_or_replace_object_into
from ..plugins import upsert_plugin_call
from ..serialization import dumps_estree
from ..toolkit.query import node_type
from ..toolkit.syntax import ARRAY_EXPRESSION
from ..toolkit.values import property_key_name
from .shared import CLIError, CLILogger, build_cli_logger, load_cli_settings, load_config_object, load_mapping

PLUGINS_KEY: Final[str] = "plugins"


def run_merge(
    path: Path,
    description: str,
    *,
    property_name: str | None = None,
    reassign: bool = False,
    logger: CLILogger | None = None,
) -> int:
    """Merge ``description`` into the configuration object of ``path``.

    Args:
        path: JavaScript configuration file.
        description: JSON object (inline or file path) to merge.
        property_name: Merge inside this property's object instead of the root.
        reassign: Replace existing values instead of appending.
        logger: Optional CLI logger.

    Returns:
        int: Exit status; the merged object is echoed as ESTree JSON on success.
    """

    log = logger or build_cli_logger(emoji=True)
    try:
        settings = load_cli_settings(path.parent)
        config_object = load_config_object(path)
        payload = load_mapping(description, label="--description")
        if property_name is None:
            merge_object_into(config_object, payload, settings=settings)
        else:
            merge_or_replace_object_into(
                config_object,
                payload,
                property_name,
                reassign=reassign,
                settings=settings,
            )
    except CLIError as exc:
        log.fail(str(exc))
        return exc.exit_code
    except (AstMergeError, TypeError) as exc:
        log.fail(f"Merge failed: {exc}")
        return 1
    log.echo(dumps_estree(config_object))
    return 0


def run_add_plugin(
    path: Path,
    plugin_name: str,
    options: str | None = None,
    *,
    logger: CLILogger | None = None,
) -> int:
    """Create or update ``new <plugin_name>(options)`` in the ``plugins`` array.

    The ``plugins`` property is added to the configuration object when absent.

    Returns:
        int: Exit status; the plugins array is echoed as ESTree JSON on success.
    """

    log = logger or build_cli_logger(emoji=True)
    try:
        config_object = load_config_object(path)
        payload = None if options is None else load_mapping(options, label="--options")
        plugins_array = _plugins_array(config_object)
        upsert_plugin_call(plugins_array, plugin_name, payload)
    except CLIError as exc:
        log.fail(str(exc))
        return exc.exit_code
    except (AstMergeError, TypeError) as exc:
        log.fail(f"Plugin update failed: {exc}")
        return 1
    log.echo(dumps_estree(plugins_array))
    return 0


def _plugins_array(config_object: nodes.Node) -> nodes.Node:
    for prop in config_object.properties:
        if property_key_name(prop) == PLUGINS_KEY and node_type(prop.value) == ARRAY_EXPRESSION:
            return prop.value
    prop = create_empty_array_property(PLUGINS_KEY)
    config_object.properties.append(prop)
    return prop.value


def merge_command(
    path: Annotated[Path, typer.Argument(help="JavaScript configuration file.")],
    description: Annotated[
        str,
        typer.Option("--description", "-d", help="JSON object or path to a JSON file."),
    ],
    property_name: Annotated[
        str | None,
        typer.Option("--property", "-p", help="Merge inside this property of the config object."),
    ] = None,
    reassign: Annotated[
        bool,
        typer.Option("--reassign/--append", help="Replace existing values instead of appending."),
    ] = False,
) -> None:
    """Typer entry point mirroring :func:`run_merge`."""

    raise typer.Exit(code=run_merge(path, description, property_name=property_name, reassign=reassign))


def add_plugin_command(
    path: Annotated[Path, typer.Argument(help="JavaScript configuration file.")],
    plugin_name: Annotated[str, typer.Argument(help="Dotted plugin name, e.g. webpack.DefinePlugin.")],
    options: Annotated[
        str | None,
        typer.Option("--options", "-o", help="JSON object or path to a JSON file."),
    ] = None,
) -> None:
    """Typer entry point mirroring :func:`run_add_plugin`."""

    raise typer.Exit(code=run_add_plugin(path, plugin_name, options))


__all__ = ["add_plugin_command", "merge_command", "run_add_plugin", "run_merge"]
