# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Small generated statements used when scaffolding configuration files."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from esprima import nodes

from .config import MergeSettings, resolve_settings
from .toolkit.builders import (
    call_expression,
    identifier,
    literal,
    variable_declaration,
    variable_declarator,
)
from .toolkit.query import NodePath, is_type
from .toolkit.syntax import ASSIGNMENT_EXPRESSION

ResultT = TypeVar("ResultT")


def get_require(
    const_name: str,
    package_path: str,
    *,
    settings: MergeSettings | None = None,
) -> nodes.VariableDeclaration:
    """Return ``const <const_name> = require("<package_path>");``.

    Args:
        const_name: Variable receiving the module.
        package_path: Module specifier passed to the import call.
        settings: Optional settings naming the declaration keyword and callee.

    Returns:
        nodes.VariableDeclaration: Declaration ready to insert into a program body.
    """

    resolved = resolve_settings(settings)
    init = call_expression(identifier(resolved.require_callee), [literal(package_path)])
    return variable_declaration(resolved.declaration_kind, [variable_declarator(identifier(const_name), init)])


def create_empty_callable_function_with_arguments(
    name: str,
    *,
    settings: MergeSettings | None = None,
) -> nodes.CallExpression:
    """Return ``name("/* Add your arguments here */")`` as a placeholder call."""

    return call_expression(identifier(name), [literal(resolve_settings(settings).argument_placeholder)])


def is_assignment(
    path: NodePath,
    callback: Callable[..., ResultT],
    *args: Any,
) -> ResultT | None:
    """Invoke ``callback(path, *args)`` when ``path`` sits directly under an assignment.

    Args:
        path: Path produced by :func:`astmerge.toolkit.query.find`.
        callback: Transform to run for assignment targets or values.
        *args: Extra positional arguments forwarded to ``callback``.

    Returns:
        ResultT | None: The callback result, or ``None`` when the parent is not an
        ``AssignmentExpression``.
    """

    if path.parent is not None and is_type(path.parent, ASSIGNMENT_EXPRESSION):
        return callback(path, *args)
    return None


__all__ = ["create_empty_callable_function_with_arguments", "get_require", "is_assignment"]
