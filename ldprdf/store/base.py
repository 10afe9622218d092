"""
Node store contract consumed by the RDF contexts.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator

from ldprdf.exceptions import AccessDeniedError, InconsistentNodeError, NodeNotFoundError

from .models import Node, Property, Value

logger = logging.getLogger(__name__)


class NodeStoreView(ABC):
    """
    Read-consistent view of the node store for one request.

    All contexts built for a request share one view. Implementations raise
    AccessDeniedError when the view's user may not read a node,
    NodeNotFoundError when it does not exist, and RepositoryError for
    anything else.
    """

    user_id: str | None = None

    @abstractmethod
    def get_node(self, node_id: str) -> Node:
        """Look up a node by identity."""

    @abstractmethod
    def find_references(self, node_id: str) -> Iterator[Property]:
        """
        Inbound reference scan.

        Yields every reference-typed property, anywhere in the store, that
        has at least one value pointing at node_id. The owning node of each
        property is given by Property.owner_id and is not access-checked.
        """

    def get_parent(self, node: Node) -> Node | None:
        if node.parent_id is None:
            return None
        return self.get_node(node.parent_id)

    def get_children(self, node: Node) -> Iterator[Node]:
        """
        Readable children of node, in store order.

        Children the view's user may not read, or that vanished since the
        parent was read, are logged and skipped. Other store failures
        propagate.
        """
        for child_id in node.child_ids:
            try:
                yield self.get_node(child_id)
            except AccessDeniedError:
                logger.warning(
                    "Skipping child %s of %s: inaccessible to user %s",
                    child_id,
                    node.node_id,
                    self.user_id,
                )
            except NodeNotFoundError:
                logger.debug("Skipping vanished child %s of %s", child_id, node.node_id)

    def resolve(self, value: Value) -> Node:
        """Resolve a reference value to its target node."""
        if not value.is_reference:
            raise InconsistentNodeError(f"Not a reference value: {value}")
        return self.get_node(value.target)
