"""
Triple - the unit of output of every RDF context.
"""

from typing import NamedTuple

from rdflib import URIRef
from rdflib.term import Identifier


class Triple(NamedTuple):
    """Immutable, value-equal (subject, predicate, object) statement."""

    subject: URIRef
    predicate: URIRef
    object: Identifier

    def __str__(self) -> str:
        return f"{self.subject.n3()} {self.predicate.n3()} {self.object.n3()} ."
