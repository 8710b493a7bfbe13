# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""ESTree node type names used across the toolkit."""

from __future__ import annotations

from typing import Final

ARRAY_EXPRESSION: Final[str] = "ArrayExpression"
ASSIGNMENT_EXPRESSION: Final[str] = "AssignmentExpression"
CALL_EXPRESSION: Final[str] = "CallExpression"
EXPRESSION_STATEMENT: Final[str] = "ExpressionStatement"
IDENTIFIER: Final[str] = "Identifier"
LITERAL: Final[str] = "Literal"
MEMBER_EXPRESSION: Final[str] = "MemberExpression"
NEW_EXPRESSION: Final[str] = "NewExpression"
OBJECT_EXPRESSION: Final[str] = "ObjectExpression"
PROPERTY: Final[str] = "Property"
UNARY_EXPRESSION: Final[str] = "UnaryExpression"
VARIABLE_DECLARATION: Final[str] = "VariableDeclaration"
VARIABLE_DECLARATOR: Final[str] = "VariableDeclarator"

PROPERTY_KIND_INIT: Final[str] = "init"

__all__ = [
    "ARRAY_EXPRESSION",
    "ASSIGNMENT_EXPRESSION",
    "CALL_EXPRESSION",
    "EXPRESSION_STATEMENT",
    "IDENTIFIER",
    "LITERAL",
    "MEMBER_EXPRESSION",
    "NEW_EXPRESSION",
    "OBJECT_EXPRESSION",
    "PROPERTY",
    "PROPERTY_KIND_INIT",
    "UNARY_EXPRESSION",
    "VARIABLE_DECLARATION",
    "VARIABLE_DECLARATOR",
]
