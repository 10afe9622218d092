"""
Tests for the Reference Context.
"""

import pytest
from rdflib.namespace import DC

from ldprdf.exceptions import RepositoryError
from ldprdf.rdf import ContainerRdfContext, ReferencesRdfContext, Triple
from ldprdf.store import PropertyType, literal, reference


def inbound(store, node_id, translator, settings, user=None):
    view = store.session(user)
    return list(ReferencesRdfContext(view.get_node(node_id), view, translator, settings))


class TestStoredReferences:
    """Explicit back-references found by the inbound reference scan."""

    def test_no_inbound_references(self, store, translator, settings):
        store.add_node("/t")
        store.add_node("/a", properties=[literal("dc:title", "A")])

        assert inbound(store, "/t", translator, settings) == []

    def test_direct_reference(self, store, translator, settings, uri):
        store.add_node("/t")
        store.add_node("/a", properties=[reference("dc:relation", "/t")])

        triples = inbound(store, "/t", translator, settings)

        assert triples == [Triple(uri("/a"), DC.relation, uri("/t"))]

    def test_all_reference_types(self, store, translator, settings, uri):
        store.add_node("/t")
        store.add_node("/a", properties=[reference("dc:relation", "/t")])
        store.add_node(
            "/b", properties=[reference("dc:source", "/t", type=PropertyType.WEAK_REFERENCE)]
        )
        store.add_node("/c", properties=[reference("dc:subject", "/t", type=PropertyType.PATH)])

        triples = inbound(store, "/t", translator, settings)

        assert set(triples) == {
            Triple(uri("/a"), DC.relation, uri("/t")),
            Triple(uri("/b"), DC.source, uri("/t")),
            Triple(uri("/c"), DC.subject, uri("/t")),
        }

    def test_literal_naming_the_node_is_not_a_reference(self, store, translator, settings):
        store.add_node("/t")
        store.add_node("/a", properties=[literal("dc:relation", "/t")])

        assert inbound(store, "/t", translator, settings) == []

    def test_repeated_value_emitted_once(self, store, translator, settings, uri):
        store.add_node("/t")
        store.add_node("/a", properties=[reference("dc:relation", "/t", "/t")])

        triples = inbound(store, "/t", translator, settings)

        assert triples == [Triple(uri("/a"), DC.relation, uri("/t"))]

    def test_inaccessible_referrer_skipped(self, store, translator, settings, uri):
        store.add_node("/t")
        store.add_node("/secret", properties=[reference("dc:relation", "/t")])
        store.add_node("/public", properties=[reference("dc:relation", "/t")])
        store.deny("anonymous", "/secret")

        triples = inbound(store, "/t", translator, settings, user="anonymous")

        assert triples == [Triple(uri("/public"), DC.relation, uri("/t"))]

    def test_scan_failure_is_fatal(self, store, translator, settings, break_node):
        store.add_node("/t")
        view = break_node(store.session(), "/t")
        node = store.session().get_node("/t")

        with pytest.raises(RepositoryError):
            list(ReferencesRdfContext(node, view, translator, settings))


class TestIndirectMembership:
    """Inbound links synthesized by Indirect Container membership."""

    @pytest.fixture
    def indirect(self, store, ex):
        store.add_node("/t")
        store.add_node("/other")
        store.add_node(
            "/c",
            types=["ldp:IndirectContainer"],
            properties=[
                literal("ldp:hasMemberRelation", str(ex.member)),
                literal("ldp:insertedContentRelation", "dc:subject"),
            ],
        )
        store.add_node(
            "/c/m1",
            properties=[reference("fedora:memberOf", "/c"), reference("dc:subject", "/t")],
        )
        store.add_node(
            "/c/m2",
            properties=[reference("fedora:memberOf", "/c"), reference("dc:subject", "/other")],
        )
        return store

    def test_membership_recovered(self, indirect, translator, settings, uri, ex):
        triples = inbound(indirect, "/t", translator, settings)

        assert set(triples) == {
            Triple(uri("/c/m1"), DC.subject, uri("/t")),
            Triple(uri("/c"), ex.member, uri("/t")),
        }

    def test_only_memberships_pointing_here(self, indirect, translator, settings, uri, ex):
        triples = inbound(indirect, "/t", translator, settings)

        assert Triple(uri("/c"), ex.member, uri("/other")) not in triples

    def test_direct_container_membership_not_synthesized(self, store, translator, settings, uri):
        store.add_node("/t")
        store.add_node("/c", types=["ldp:DirectContainer"])
        store.add_node(
            "/c/m",
            properties=[reference("fedora:memberOf", "/c"), reference("dc:subject", "/t")],
        )

        triples = inbound(store, "/t", translator, settings)

        assert triples == [Triple(uri("/c/m"), DC.subject, uri("/t"))]

    def test_stored_and_derived_fact_emitted_once(self, indirect, translator, settings, uri, ex):
        # The container also stores the membership fact explicitly
        indirect.set_property("/c", reference(str(ex.member), "/t"))

        triples = inbound(indirect, "/t", translator, settings)

        assert triples.count(Triple(uri("/c"), ex.member, uri("/t"))) == 1
        assert len(triples) == 2

    def test_container_derived_once_per_parent(
        self, indirect, translator, settings, monkeypatch
    ):
        indirect.add_node(
            "/c/m3",
            properties=[reference("fedora:memberOf", "/c"), reference("dc:subject", "/t")],
        )
        derived = []

        class CountingContainerContext(ContainerRdfContext):
            def __init__(self, node, *args, **kwargs):
                derived.append(node.node_id)
                super().__init__(node, *args, **kwargs)

        monkeypatch.setattr(
            "ldprdf.rdf.references.ContainerRdfContext", CountingContainerContext
        )

        inbound(indirect, "/t", translator, settings)

        assert derived == ["/c"]

    def test_inaccessible_container_skipped(self, indirect, translator, settings, uri):
        indirect.deny("anonymous", "/c")

        triples = inbound(indirect, "/t", translator, settings, user="anonymous")

        assert triples == [Triple(uri("/c/m1"), DC.subject, uri("/t"))]
