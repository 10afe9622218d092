"""
Pytest configuration and fixtures for ldp-rdf tests.
"""

from pathlib import Path

import pytest
from rdflib import Namespace

from ldprdf.config.settings import Settings, reset_settings
from ldprdf.exceptions import RepositoryError
from ldprdf.identifiers import DefaultIdentifierTranslator
from ldprdf.store import InMemoryNodeStore, InMemoryStoreView

BASE_URI = "http://localhost:8080/rest"
EX = Namespace("http://example.org/")
FIXTURES_DIR = Path(__file__).parent / "fixtures"


class BrokenStoreView(InMemoryStoreView):
    """Store view whose reads of one node fail with a store error."""

    def __init__(self, view: InMemoryStoreView, broken_id: str):
        super().__init__(view._nodes, view._denied, view.user_id)
        self.broken_id = broken_id

    def get_node(self, node_id):
        if node_id == self.broken_id:
            raise RepositoryError(f"I/O error reading {node_id}")
        return super().get_node(node_id)

    def find_references(self, node_id):
        if node_id == self.broken_id:
            raise RepositoryError(f"Reference index unavailable for {node_id}")
        return super().find_references(node_id)


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of any local ldprdf.yaml."""
    return Settings()


@pytest.fixture
def fresh_settings():
    """Drop the cached global settings before and after the test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def translator() -> DefaultIdentifierTranslator:
    return DefaultIdentifierTranslator(BASE_URI)


@pytest.fixture
def uri(translator):
    """Resource URI of a node path."""
    return translator.to_uri


@pytest.fixture
def store() -> InMemoryNodeStore:
    return InMemoryNodeStore()


@pytest.fixture
def books_fixture() -> Path:
    return FIXTURES_DIR / "books.yaml"


@pytest.fixture
def ex() -> Namespace:
    return EX


@pytest.fixture
def break_node():
    """Wrap a view so that reading one node fails with a store error."""
    return BrokenStoreView
