"""
In-memory node store.

A small reference adapter for the node store contract, used by the CLI and
the test suite. Nodes are identified by their absolute path ("/a/b"); the
root node "/" always exists.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from ldprdf.exceptions import AccessDeniedError, NodeNotFoundError, RepositoryError

from .base import NodeStoreView
from .models import Node, Property, PropertyType, Value

logger = logging.getLogger(__name__)

ROOT_ID = "/"


def parent_path(node_id: str) -> str | None:
    """Return the path of the parent node, or None for the root."""
    if node_id == ROOT_ID:
        return None
    head = node_id.rstrip("/").rsplit("/", 1)[0]
    return head or ROOT_ID


class InMemoryNodeStore:
    """
    Mutable in-memory node store.

    Reads go through views returned by session(); each view works on a
    snapshot taken when it was opened, so later writes are invisible to it.
    """

    def __init__(self):
        self._nodes: dict[str, Node] = {ROOT_ID: Node(node_id=ROOT_ID)}
        self._denied: dict[str, set[str]] = {}

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def add_node(
        self,
        node_id: str,
        types: Iterable[str] = (),
        properties: Iterable[Property] = (),
    ) -> Node:
        """
        Create a node under an existing parent.

        Args:
            node_id: Absolute path of the new node
            types: Type tags (e.g. "ldp:BasicContainer", "fedora:Skolem")
            properties: Properties of the node, in store order

        Returns:
            The stored node
        """
        if not node_id.startswith("/") or node_id in self._nodes:
            raise RepositoryError(f"Cannot create node at {node_id!r}")

        parent_id = parent_path(node_id)
        if parent_id not in self._nodes:
            raise NodeNotFoundError(parent_id)

        node = Node(
            node_id=node_id,
            types=tuple(types),
            properties=tuple(replace(p, owner_id=node_id) for p in properties),
            parent_id=parent_id,
        )
        self._nodes[node_id] = node

        parent = self._nodes[parent_id]
        self._nodes[parent_id] = replace(parent, child_ids=parent.child_ids + (node_id,))

        logger.debug("Added node %s (%d properties)", node_id, len(node.properties))
        return node

    def set_property(self, node_id: str, prop: Property) -> Node:
        """Add or replace a property on an existing node."""
        node = self._get(node_id)
        prop = replace(prop, owner_id=node_id)
        props = [p for p in node.properties if p.name != prop.name]
        props.append(prop)
        node = replace(node, properties=tuple(props))
        self._nodes[node_id] = node
        return node

    def remove_property(self, node_id: str, name: str) -> Node:
        node = self._get(node_id)
        node = replace(node, properties=tuple(p for p in node.properties if p.name != name))
        self._nodes[node_id] = node
        return node

    def deny(self, user_id: str, node_id: str) -> None:
        """Hide a node from one user."""
        self._denied.setdefault(user_id, set()).add(node_id)

    def session(self, user_id: str | None = None) -> "InMemoryStoreView":
        """Open a read-consistent view for one request."""
        return InMemoryStoreView(
            nodes=dict(self._nodes),
            denied=frozenset(self._denied.get(user_id, ())),
            user_id=user_id,
        )

    def _get(self, node_id: str) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None


class InMemoryStoreView(NodeStoreView):
    """Snapshot view over an InMemoryNodeStore."""

    def __init__(self, nodes: dict[str, Node], denied: frozenset[str], user_id: str | None):
        self._nodes = nodes
        self._denied = denied
        self.user_id = user_id

    def get_node(self, node_id: str) -> Node:
        if node_id not in self._nodes:
            raise NodeNotFoundError(node_id)
        if node_id in self._denied:
            raise AccessDeniedError(node_id, self.user_id)
        return self._nodes[node_id]

    def find_references(self, node_id: str) -> Iterator[Property]:
        for node in self._nodes.values():
            for prop in node.properties:
                if prop.references(node_id):
                    yield prop


def literal(name: str, *values, datatype: str = "xsd:string") -> Property:
    """Build a literal property; more than one value makes it multi-valued."""
    return Property(
        name=name,
        type=PropertyType.LITERAL,
        values=tuple(Value.literal(v, datatype) for v in values),
        multiple=len(values) > 1,
    )


def reference(
    name: str, *targets: str, type: PropertyType = PropertyType.REFERENCE
) -> Property:
    """Build a reference property pointing at one or more node ids."""
    return Property(
        name=name,
        type=type,
        values=tuple(Value.reference(t) for t in targets),
        multiple=len(targets) > 1,
    )
