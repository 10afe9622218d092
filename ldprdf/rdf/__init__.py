"""
RDF Module - projection of stored nodes into LDP triples.

Components:
- context.py: RdfContext base, lazy concatenation, graph collection
- properties.py: the node's own properties
- references.py: inbound references, including Indirect Container membership
- container.py: Basic/Direct/Indirect container membership
- skolem.py: inlined skolem node descriptions
- representation.py: facet composition with de-duplication
"""

from .container import MEMBERSHIP_RULES, ContainerRdfContext
from .context import RdfContext, to_graph, unique
from .namespaces import FEDORA, LDP, NamespaceResolver
from .properties import PropertyRdfContext
from .references import ReferencesRdfContext
from .representation import (
    ALL_FACETS,
    RdfFacet,
    Representation,
    build_representation,
    parse_facets,
)
from .skolem import SkolemNodeRdfContext
from .triple import Triple
from .values import ValueConverter

__all__ = [
    # Base
    "RdfContext",
    "Triple",
    "ValueConverter",
    "NamespaceResolver",
    "LDP",
    "FEDORA",
    "to_graph",
    "unique",
    # Contexts
    "PropertyRdfContext",
    "ReferencesRdfContext",
    "ContainerRdfContext",
    "MEMBERSHIP_RULES",
    "SkolemNodeRdfContext",
    # Composition
    "ALL_FACETS",
    "RdfFacet",
    "Representation",
    "build_representation",
    "parse_facets",
]
