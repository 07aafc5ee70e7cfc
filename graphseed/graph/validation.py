"""Node validation — reject nodes the loader cannot place in the graph."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from graphseed.graph.errors import MissingParentError, NodeValidationError
from graphseed.graph.node import GraphNode
from graphseed.graph.requirements import RequirementTable

logger = logging.getLogger(__name__)


class NodeValidator:
    """Checks nodes against an injected requirement table.

    Pure and synchronous: no I/O, no state beyond the read-only table.
    """

    def __init__(self, table: RequirementTable | None = None) -> None:
        self.table = table if table is not None else RequirementTable.default()

    def validate(self, node: GraphNode) -> None:
        """Raise if the node's type is unknown or a required parent is missing.

        Usage::

            port = Port(number=443)
            validator.validate(port)   # MissingParentError
            port.belongs_to(host)
            validator.validate(port)   # passes
        """
        node_type = node.node_type()
        if self.table.requires_parent(node_type) and node.parent_ref() is None:
            raise MissingParentError(node_type)

    def validate_all(self, nodes: Iterable[GraphNode]) -> list[NodeValidationError]:
        """Validate every node and return the failures in sequence order."""
        errors: list[NodeValidationError] = []
        for node in nodes:
            try:
                self.validate(node)
            except NodeValidationError as e:
                logger.debug("Rejected %s node: %s", e.node_type, e)
                errors.append(e)
        return errors

    def iter_valid(self, nodes: Iterable[GraphNode]) -> Iterator[GraphNode]:
        """Yield nodes in order, raising on the first invalid one."""
        for node in nodes:
            self.validate(node)
            yield node


def validate_node(node: GraphNode, table: RequirementTable | None = None) -> None:
    """Validate a single node against ``table`` (the canonical one by default)."""
    NodeValidator(table).validate(node)
