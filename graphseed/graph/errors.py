"""Validation errors raised before nodes are handed to the graph loader."""

from __future__ import annotations


class NodeValidationError(Exception):
    """A node cannot be stored as-is."""

    def __init__(self, node_type: str, message: str) -> None:
        super().__init__(message)
        self.node_type = node_type


class UnknownNodeTypeError(NodeValidationError):
    """The node's type tag is not in the requirement table."""

    def __init__(self, node_type: str) -> None:
        super().__init__(
            node_type, f"unknown node type '{node_type}' - not found in taxonomy",
        )


class MissingParentError(NodeValidationError):
    """A dependent node type has no parent reference."""

    def __init__(self, node_type: str) -> None:
        super().__init__(
            node_type,
            f"{node_type} requires a parent. Use node.belongs_to(parent) to set "
            "the parent relationship before storage",
        )


class TaxonomyLoadError(Exception):
    """A requirement table file is missing or malformed."""
