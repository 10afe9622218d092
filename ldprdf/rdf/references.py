"""
Reference Context - accumulates inbound references to a node.

Stored references are found with the store's inbound reference scan.
Indirect Container memberships are generated on the fly by the Container
Context and never show up in that scan, so the referrers found are also
checked for membership in an Indirect Container, whose derived triples are
then filtered down to the ones pointing at this node.
"""

import logging
from collections.abc import Iterator

from ldprdf.exceptions import AccessDeniedError, NodeNotFoundError
from ldprdf.store import ContainerPolicy, Node, Property

from .container import ContainerRdfContext
from .context import RdfContext, unique
from .triple import Triple

logger = logging.getLogger(__name__)


class ReferencesRdfContext(RdfContext):
    """
    Inbound reference triples (referrer, predicate, this node).

    Traversal is bounded to two hops: referrer, then the referrer's parent
    container. Each parent container is derived at most once, and every
    fact is emitted once.
    """

    def __init__(self, node, view, translator, settings=None):
        super().__init__(node, view, translator, settings)
        self._seen: set[Triple] = set()
        self.concat(unique(self._inbound_triples(), self._seen))

    def _inbound_triples(self) -> Iterator[Triple]:
        referrers: list[Node] = []

        for prop in self.view.find_references(self.node.node_id):
            referrer = self._readable_owner(prop)
            if referrer is None:
                continue
            referrers.append(referrer)
            yield from self._stored_reference(prop, referrer)

        yield from self._indirect_memberships(referrers)

    def _readable_owner(self, prop: Property) -> Node | None:
        try:
            return self.view.get_node(prop.owner_id)
        except AccessDeniedError:
            logger.warning(
                "Skipping reference %s from %s: inaccessible to user %s",
                prop.name,
                prop.owner_id,
                self.view.user_id,
            )
        except NodeNotFoundError:
            logger.debug("Skipping reference %s from vanished node %s", prop.name, prop.owner_id)
        return None

    def _stored_reference(self, prop: Property, referrer: Node) -> Iterator[Triple]:
        if self.converter.is_internal(prop.name):
            return
        yield Triple(self.uri_for(referrer), self.converter.predicate_for(prop), self.subject)

    def _indirect_memberships(self, referrers: list[Node]) -> Iterator[Triple]:
        subject = self.subject
        visited: set[str] = set()

        for referrer in referrers:
            parent_id = referrer.parent_id
            if parent_id is None or parent_id in visited:
                continue
            visited.add(parent_id)

            try:
                container = self.view.get_parent(referrer)
            except AccessDeniedError:
                logger.warning(
                    "Skipping container %s of %s: inaccessible to user %s",
                    parent_id,
                    referrer.node_id,
                    self.view.user_id,
                )
                continue
            except NodeNotFoundError:
                continue

            if container.container_policy is not ContainerPolicy.INDIRECT:
                continue

            logger.debug("Deriving indirect membership of %s via %s", self.node.node_id, parent_id)
            membership = ContainerRdfContext(container, self.view, self.translator, self.settings)
            for triple in membership:
                if triple.object == subject:
                    yield triple
