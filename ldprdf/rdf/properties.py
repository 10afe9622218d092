"""
Property Context - projects a node's own properties into triples.
"""

import logging
from collections.abc import Iterator

from rdflib.namespace import RDF

from .context import RdfContext
from .triple import Triple

logger = logging.getLogger(__name__)


class PropertyRdfContext(RdfContext):
    """
    One triple per value of every property of the node.

    Type tags become rdf:type triples. Literal values keep their datatype;
    reference, weak reference and path values point at the target's
    resource URI. Server-internal names are skipped.
    """

    def __init__(self, node, view, translator, settings=None):
        super().__init__(node, view, translator, settings)
        self.concat(self._type_triples())
        self.concat(self._property_triples())

    def _type_triples(self) -> Iterator[Triple]:
        subject = self.subject
        for type_tag in self.node.types:
            if self.converter.is_internal(type_tag):
                continue
            yield Triple(subject, RDF.type, self.converter.namespaces.expand(type_tag))

    def _property_triples(self) -> Iterator[Triple]:
        subject = self.subject
        for prop in self.node.properties:
            if self.converter.is_internal(prop.name):
                logger.debug("Skipping internal property %s on %s", prop.name, self.node.node_id)
                continue
            predicate = self.converter.predicate_for(prop)
            for term in self.converter.terms(prop):
                yield Triple(subject, predicate, term)
