"""
Tests for facet composition of a resource's representation.
"""

import pytest
from rdflib import Graph
from rdflib.namespace import DC

from ldprdf.exceptions import NodeNotFoundError, RepositoryError
from ldprdf.rdf import (
    ALL_FACETS,
    LDP,
    RdfFacet,
    Representation,
    Triple,
    build_representation,
    parse_facets,
    to_graph,
)
from ldprdf.store import literal, load_store_file, reference


class TestParseFacets:
    def test_canonical_order(self):
        assert parse_facets(["skolem", "Properties"]) == (RdfFacet.PROPERTIES, RdfFacet.SKOLEM)

    def test_unknown_facet(self):
        with pytest.raises(ValueError, match="Unknown facet"):
            parse_facets(["properties", "acl"])


class TestDeduplication:
    def test_self_reference_emitted_once(self, store, translator, settings, uri):
        store.add_node("/a", properties=[reference("dc:relation", "/a")])
        view = store.session()

        triples = list(build_representation("/a", view, translator, settings=settings))

        assert triples == [Triple(uri("/a"), DC.relation, uri("/a"))]

    def test_reference_and_container_derive_same_fact(self, store, translator, settings, uri, ex):
        store.add_node(
            "/c",
            types=["ldp:IndirectContainer"],
            properties=[
                literal("ldp:hasMemberRelation", str(ex.member)),
                literal("ldp:insertedContentRelation", "dc:subject"),
            ],
        )
        store.add_node(
            "/c/m",
            properties=[reference("fedora:memberOf", "/c"), reference("dc:subject", "/c")],
        )
        view = store.session()
        facets = (RdfFacet.REFERENCES, RdfFacet.CONTAINMENT)

        triples = list(build_representation("/c", view, translator, facets, settings))

        assert triples.count(Triple(uri("/c"), ex.member, uri("/c"))) == 1
        assert len(triples) == len(set(triples))

    def test_no_duplicates_in_full_fixture(self, books_fixture, translator, settings):
        view = load_store_file(books_fixture).session()

        for node_id in ("/books", "/books/b1", "/authors", "/authors/melville"):
            triples = list(build_representation(node_id, view, translator, settings=settings))
            assert len(triples) == len(set(triples)), node_id


class TestComposition:
    def test_facets_selected(self, store, translator, settings, uri):
        store.add_node("/c", types=["ldp:BasicContainer"], properties=[literal("dc:title", "C")])
        store.add_node("/c/a")
        view = store.session()

        triples = list(
            build_representation("/c", view, translator, [RdfFacet.CONTAINMENT], settings)
        )

        assert triples == [Triple(uri("/c"), LDP.contains, uri("/c/a"))]

    def test_canonical_emission_order(self, store, translator, settings, uri):
        store.add_node("/c", types=["ldp:BasicContainer"], properties=[literal("dc:title", "C")])
        store.add_node("/c/a", properties=[reference("dc:relation", "/c")])
        view = store.session()

        triples = list(build_representation("/c", view, translator, ALL_FACETS, settings))

        assert [t.predicate for t in triples][-2:] == [DC.relation, LDP.contains]
        assert triples[-2].subject == uri("/c/a")

    def test_plain_resource_has_only_properties(self, store, translator, settings):
        store.add_node("/a", properties=[literal("dc:title", "A")])
        view = store.session()

        triples = list(build_representation("/a", view, translator, settings=settings))

        assert [t.predicate for t in triples] == [DC.title]

    def test_missing_resource(self, store, translator, settings):
        with pytest.raises(NodeNotFoundError):
            build_representation("/missing", store.session(), translator, settings=settings)


class TestLaziness:
    def test_store_not_read_until_pulled(self, store, translator, settings, break_node):
        store.add_node("/a")
        node = store.session().get_node("/a")
        view = break_node(store.session(), "/a")

        representation = Representation(node, view, translator, ALL_FACETS, settings)

        # The inbound scan only fails once the references facet is reached
        with pytest.raises(RepositoryError):
            list(representation)

    def test_single_pass(self, store, translator, settings):
        store.add_node("/a", properties=[literal("dc:title", "A")])
        representation = build_representation("/a", store.session(), translator, settings=settings)

        assert len(list(representation)) == 1
        assert list(representation) == []

    def test_partial_consumption_leaves_store_untouched(self, store, translator, settings):
        store.add_node("/a", properties=[literal("dc:title", "A"), literal("dc:creator", "B")])
        view = store.session()

        representation = build_representation("/a", view, translator, settings=settings)
        next(representation)
        del representation

        assert len(view.get_node("/a").properties) == 2

    def test_view_is_a_snapshot(self, store, translator, settings):
        store.add_node("/a", properties=[literal("dc:title", "A")])
        view = store.session()
        store.set_property("/a", literal("dc:creator", "B"))

        triples = list(build_representation("/a", view, translator, settings=settings))

        assert [t.predicate for t in triples] == [DC.title]


class TestToGraph:
    def test_collect_into_graph(self, store, translator, settings, uri):
        store.add_node("/a", properties=[literal("dc:title", "A"), literal("dc:creator", "B")])
        representation = build_representation("/a", store.session(), translator, settings=settings)

        graph = representation.collect()

        assert isinstance(graph, Graph)
        assert len(graph) == 2
        assert (uri("/a"), DC.title, None) in graph

    def test_prefixes_bound(self, settings):
        graph = to_graph([], settings)

        assert str(dict(graph.namespaces())["ldp"]) == str(LDP)
