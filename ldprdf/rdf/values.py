"""
Value conversion - maps stored property values to RDF terms.
"""

import logging
from collections.abc import Iterator

from rdflib import Literal, URIRef
from rdflib.term import Identifier

from ldprdf.config.settings import Settings
from ldprdf.exceptions import AccessDeniedError, NodeNotFoundError
from ldprdf.identifiers import IdentifierTranslator
from ldprdf.store import Node, NodeStoreView, Property, Value

from .namespaces import NamespaceResolver

logger = logging.getLogger(__name__)


class ValueConverter:
    """
    Converts property names and values of one store view into RDF terms.

    Reference values are resolved through the store so that access control
    applies; the resulting node is then published via the translator.
    """

    def __init__(
        self,
        view: NodeStoreView,
        translator: IdentifierTranslator,
        settings: Settings,
    ):
        self.view = view
        self.translator = translator
        self.namespaces = NamespaceResolver(settings.namespaces.prefixes)
        self.excluded_prefixes = frozenset(settings.rdf.excluded_prefixes)
        self.reference_suffix = settings.rdf.reference_suffix

    def is_internal(self, name: str) -> bool:
        """Server-managed names are never projected."""
        return name.split(":", 1)[0] in self.excluded_prefixes

    def predicate_for(self, prop: Property) -> URIRef:
        name = prop.name
        if prop.type.is_reference and self.reference_suffix and name.endswith(self.reference_suffix):
            name = name[: -len(self.reference_suffix)]
        return self.namespaces.expand(name)

    def resolve_node(self, value: Value) -> Node:
        """Resolve a reference value; raises AccessDeniedError / NodeNotFoundError."""
        return self.view.resolve(value)

    def to_term(self, prop: Property, value: Value) -> Identifier:
        if prop.type.is_reference:
            return self.translator.to_uri(self.resolve_node(value).node_id)
        return Literal(value.lexical, datatype=self.namespaces.expand(value.datatype))

    def terms(self, prop: Property) -> Iterator[Identifier]:
        """
        Yield the RDF term of every value of prop, in store order.

        Values the current user may not read are logged and omitted, as are
        references to nodes that no longer exist.
        """
        for value in prop.values:
            try:
                yield self.to_term(prop, value)
            except AccessDeniedError:
                logger.warning(
                    "Omitting %s value %s: inaccessible to user %s",
                    prop.name,
                    value,
                    self.view.user_id,
                )
            except NodeNotFoundError:
                logger.debug("Omitting %s value %s: target does not exist", prop.name, value)
