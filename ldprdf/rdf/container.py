"""
Container Context - derives LDP membership triples for container nodes.

Membership triples are never stored; they are recomputed from the
container's children on every request. The three container policies
differ only in how members are found and how the object of each triple is
computed, so they share one decision table.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from rdflib import URIRef
from rdflib.term import Identifier

from ldprdf.store import ContainerPolicy, Node

from .context import RdfContext
from .triple import Triple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MembershipRule:
    """How one container policy finds members and computes triple objects."""

    members: Callable[["ContainerRdfContext"], Iterator[Node]]
    objects: Callable[["ContainerRdfContext", Node], Iterator[Identifier]]
    configurable_relation: bool


def _no_members(context: "ContainerRdfContext") -> Iterator[Node]:
    return iter(())


def _children(context: "ContainerRdfContext") -> Iterator[Node]:
    return context.children()


def _back_referencing_children(context: "ContainerRdfContext") -> Iterator[Node]:
    back_reference = context.settings.ldp.member_back_reference
    for child in context.children():
        prop = child.get_property(back_reference)
        if prop is not None and prop.references(context.node.node_id):
            yield child


def _member_uri(context: "ContainerRdfContext", member: Node) -> Iterator[Identifier]:
    yield context.uri_for(member)


def _inserted_content(context: "ContainerRdfContext", member: Node) -> Iterator[Identifier]:
    return context.inserted_content(member)


MEMBERSHIP_RULES: dict[ContainerPolicy, MembershipRule] = {
    ContainerPolicy.NONE: MembershipRule(_no_members, _member_uri, False),
    ContainerPolicy.BASIC: MembershipRule(_children, _member_uri, False),
    ContainerPolicy.DIRECT: MembershipRule(_back_referencing_children, _member_uri, True),
    ContainerPolicy.INDIRECT: MembershipRule(_back_referencing_children, _inserted_content, True),
}


class ContainerRdfContext(RdfContext):
    """
    Membership triples of a container node.

    - Basic: (container, ldp:contains, child) for every child
    - Direct: (container, relation, member) for every child holding the
      member back-reference to the container
    - Indirect: as Direct, but the object is the value of the member's
      inserted content relation property
    - None: nothing
    """

    def __init__(self, node, view, translator, settings=None):
        super().__init__(node, view, translator, settings)
        self.concat(self._membership_triples())

    def _membership_triples(self) -> Iterator[Triple]:
        policy = self.node.container_policy
        rule = MEMBERSHIP_RULES[policy]

        subject = self.subject
        predicate = self.member_relation() if rule.configurable_relation else self.default_relation()
        logger.debug("Deriving %s membership of %s as %s", policy.value, self.node.node_id, predicate)

        for member in rule.members(self):
            for term in rule.objects(self, member):
                yield Triple(subject, predicate, term)

    def children(self) -> Iterator[Node]:
        """Readable children of the container, in store order."""
        return self.view.get_children(self.node)

    def default_relation(self) -> URIRef:
        return self.converter.namespaces.expand(self.settings.ldp.default_member_relation)

    def member_relation(self) -> URIRef:
        """Configured ldp:hasMemberRelation of the container, or ldp:contains."""
        prop = self.node.get_property(self.settings.ldp.has_member_relation)
        if prop is None or prop.value is None:
            return self.default_relation()
        value = prop.value
        if value.is_reference:
            return self.translator.to_uri(value.target)
        return self.converter.namespaces.expand(value.lexical)

    def inserted_content_relation(self) -> str | None:
        """Property name named by the container's ldp:insertedContentRelation."""
        prop = self.node.get_property(self.settings.ldp.inserted_content_relation)
        if prop is None or prop.value is None or prop.value.lexical is None:
            return None
        return self.converter.namespaces.compact(prop.value.lexical)

    def inserted_content(self, member: Node) -> Iterator[Identifier]:
        relation = self.inserted_content_relation()
        if relation is None:
            logger.debug("Indirect container %s has no inserted content relation", self.node.node_id)
            return

        prop = member.get_property(relation)
        if prop is None:
            prop = member.get_property(relation + self.settings.rdf.reference_suffix)
        if prop is None:
            logger.debug("Member %s lacks %s", member.node_id, relation)
            return

        yield from self.converter.terms(prop)
