"""
Representation builder - composes the requested facets of one resource.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from ldprdf.config.settings import Settings
from ldprdf.identifiers import IdentifierTranslator
from ldprdf.store import NodeStoreView

from .container import ContainerRdfContext
from .context import RdfContext, unique
from .properties import PropertyRdfContext
from .references import ReferencesRdfContext
from .skolem import SkolemNodeRdfContext
from .triple import Triple

logger = logging.getLogger(__name__)


class RdfFacet(str, Enum):
    """A requestable part of a resource's representation."""

    PROPERTIES = "properties"
    REFERENCES = "references"
    CONTAINMENT = "containment"
    SKOLEM = "skolem"


# Canonical emission order; when two facets derive the same fact the
# earlier facet's triple is the one kept.
ALL_FACETS: tuple[RdfFacet, ...] = (
    RdfFacet.PROPERTIES,
    RdfFacet.REFERENCES,
    RdfFacet.CONTAINMENT,
    RdfFacet.SKOLEM,
)

FACET_CONTEXTS: dict[RdfFacet, type[RdfContext]] = {
    RdfFacet.PROPERTIES: PropertyRdfContext,
    RdfFacet.REFERENCES: ReferencesRdfContext,
    RdfFacet.CONTAINMENT: ContainerRdfContext,
    RdfFacet.SKOLEM: SkolemNodeRdfContext,
}


def parse_facets(names: Iterable[str]) -> tuple[RdfFacet, ...]:
    """
    Parse facet names ("properties", "references", ...) in canonical order.

    Raises:
        ValueError: for an unknown facet name
    """
    requested = set()
    for name in names:
        try:
            requested.add(RdfFacet(name.strip().lower()))
        except ValueError:
            raise ValueError(
                f"Unknown facet: {name}. Supported: {[f.value for f in RdfFacet]}"
            ) from None
    return tuple(f for f in ALL_FACETS if f in requested)


class Representation(RdfContext):
    """
    The full triple stream of one resource for a set of facets.

    Facet contexts are concatenated in canonical order and filtered through
    a fact set owned by this representation, so no triple appears twice.
    """

    def __init__(self, node, view, translator, facets=ALL_FACETS, settings=None):
        super().__init__(node, view, translator, settings)
        requested = set(facets)
        self.facets = tuple(f for f in ALL_FACETS if f in requested)
        self._seen: set[Triple] = set()

        for facet in self.facets:
            context = FACET_CONTEXTS[facet](node, view, translator, self.settings)
            self.concat(unique(context, self._seen))


def build_representation(
    node_id: str,
    view: NodeStoreView,
    translator: IdentifierTranslator,
    facets: Iterable[RdfFacet] = ALL_FACETS,
    settings: Settings | None = None,
) -> Representation:
    """
    Build the lazy representation of a resource.

    Args:
        node_id: Identity of the resource's node
        view: Store view of the current request
        translator: Identifier translator of the current request
        facets: Facets to include
        settings: Configuration (defaults to the global settings)

    Returns:
        Representation yielding each triple once
    """
    node = view.get_node(node_id)
    representation = Representation(node, view, translator, facets, settings)
    logger.info(
        "Building representation of %s with facets %s",
        node_id,
        [f.value for f in representation.facets],
    )
    return representation
