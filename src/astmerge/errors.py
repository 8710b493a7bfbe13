# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by astmerge operations."""

from __future__ import annotations


class AstMergeError(Exception):
    """Base class for errors raised by astmerge."""


class NodeShapeError(AstMergeError, TypeError):
    """Raised when an operation searches inside a node of the wrong kind."""

    def __init__(self, expected: str, node: object) -> None:
        """Create the error for a node that is not an ``expected`` node.

        Args:
            expected: ESTree node type the operation required.
            node: Node (or arbitrary value) actually supplied.
        """

        actual = getattr(node, "type", None) or type(node).__name__
        super().__init__(f"expected a {expected} node, got {actual}")
        self.expected = expected
        self.actual = actual


class StaticValueError(AstMergeError, ValueError):
    """Raised when a node does not describe a statically known value."""


class SourceParseError(AstMergeError, ValueError):
    """Raised when esprima cannot parse JavaScript source."""


class ConfigError(AstMergeError):
    """Raised when configuration input is invalid."""


__all__ = ("AstMergeError", "ConfigError", "NodeShapeError", "SourceParseError", "StaticValueError")
