"""
Skolem Context - embeds descriptions of skolem nodes in the stream.

Skolem nodes are generated by the repository (blank nodes of ingested
RDF) and cannot be dereferenced on their own, so the resource that points
at them carries their description.
"""

import logging
from collections.abc import Iterator

from ldprdf.exceptions import AccessDeniedError, NodeNotFoundError
from ldprdf.store import Node, Value

from .context import RdfContext
from .properties import PropertyRdfContext
from .triple import Triple

logger = logging.getLogger(__name__)


class SkolemNodeRdfContext(RdfContext):
    """Property triples of every skolem node referenced by this node, once each."""

    def __init__(self, node, view, translator, settings=None):
        super().__init__(node, view, translator, settings)
        self._described: set[str] = set()
        self.concat(self._skolem_triples())

    def _skolem_triples(self) -> Iterator[Triple]:
        for target in self._skolem_nodes():
            if target.node_id in self._described:
                continue
            self._described.add(target.node_id)
            yield from PropertyRdfContext(target, self.view, self.translator, self.settings)

    def _skolem_nodes(self) -> Iterator[Node]:
        for prop in self.node.properties:
            if not prop.type.is_reference or self.converter.is_internal(prop.name):
                continue
            for value in prop.values:
                target = self._resolve(value)
                if target is not None and target.is_skolem:
                    yield target

    def _resolve(self, value: Value) -> Node | None:
        try:
            return self.converter.resolve_node(value)
        except AccessDeniedError:
            logger.error("Link inaccessible by requesting user: %s, %s", value, self.view.user_id)
        except NodeNotFoundError:
            logger.debug("Dangling link to %s", value)
        return None
