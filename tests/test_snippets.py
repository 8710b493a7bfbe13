# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering generated statement snippets."""

from __future__ import annotations

from astmerge.config import MergeSettings
from astmerge.snippets import create_empty_callable_function_with_arguments, get_require, is_assignment
from astmerge.toolkit.query import find, parse_script


def test_get_require_builds_const_declaration() -> None:
    """``get_require`` should build a ``const`` require statement."""

    declaration = get_require("path", "path")

    assert declaration.type == "VariableDeclaration"
    assert declaration.kind == "const"
    declarator = declaration.declarations[0]
    assert declarator.id.name == "path"
    assert declarator.init.callee.name == "require"
    assert declarator.init.arguments[0].value == "path"


def test_get_require_honours_settings() -> None:
    """Declaration kind and callee should follow the settings."""

    settings = MergeSettings(declaration_kind="let", require_callee="load")

    declaration = get_require("HtmlPlugin", "html-webpack-plugin", settings=settings)

    assert declaration.kind == "let"
    assert declaration.declarations[0].init.callee.name == "load"
    assert declaration.declarations[0].init.arguments[0].value == "html-webpack-plugin"


def test_placeholder_call_carries_argument_text() -> None:
    """The placeholder call should carry the argument hint."""

    call = create_empty_callable_function_with_arguments("merge")

    assert call.type == "CallExpression"
    assert call.callee.name == "merge"
    assert [arg.value for arg in call.arguments] == ["/* Add your arguments here */"]


def test_is_assignment_invokes_callback_for_assigned_values() -> None:
    """Callbacks should run only for paths under an assignment."""

    program = parse_script("module.exports = { a: 1 };\nconst other = { b: 2 };")
    exported, declared = find(program, "ObjectExpression")
    seen: list[tuple[str, str]] = []

    def record(path, label):
        seen.append((path.type, label))
        return label

    assert is_assignment(exported, record, "exports") == "exports"
    assert is_assignment(declared, record, "declared") is None
    assert seen == [("ObjectExpression", "exports")]
