"""
RDF Context - lazy, single-pass stream of triples about one node.

Every facet of a resource's representation is an RdfContext subclass that
queues its triple sources with concat() while being constructed. Nothing is
read from the store until the consumer starts pulling triples.
"""

import logging
from collections import deque
from collections.abc import Iterable, Iterator

from rdflib import Graph, URIRef

from ldprdf.config import get_settings
from ldprdf.config.settings import Settings
from ldprdf.identifiers import IdentifierTranslator
from ldprdf.store import Node, NodeStoreView

from .triple import Triple
from .values import ValueConverter

logger = logging.getLogger(__name__)


class RdfContext(Iterator[Triple]):
    """
    Base class of all RDF contexts.

    Sources passed to concat() are drained in order. Duplicates are not
    removed here; contexts that must not repeat a fact filter with unique().
    Once exhausted a context stays exhausted.
    """

    def __init__(
        self,
        node: Node,
        view: NodeStoreView,
        translator: IdentifierTranslator,
        settings: Settings | None = None,
    ):
        """
        Initialize the context.

        Args:
            node: Node the triples describe
            view: Store view of the current request
            translator: Identifier translator of the current request
            settings: Configuration (defaults to the global settings)
        """
        self.node = node
        self.view = view
        self.translator = translator
        self.settings = settings or get_settings()
        self.converter = ValueConverter(view, translator, self.settings)
        self._sources: deque[Iterable[Triple]] = deque()
        self._current: Iterator[Triple] | None = None

    @property
    def subject(self) -> URIRef:
        return self.translator.to_uri(self.node.node_id)

    def uri_for(self, node: Node) -> URIRef:
        return self.translator.to_uri(node.node_id)

    def concat(self, triples: Iterable[Triple]) -> "RdfContext":
        """Append a source of triples (another context or any iterable)."""
        self._sources.append(triples)
        return self

    def __iter__(self) -> "RdfContext":
        return self

    def __next__(self) -> Triple:
        while True:
            if self._current is None:
                if not self._sources:
                    raise StopIteration
                self._current = iter(self._sources.popleft())
            try:
                return next(self._current)
            except StopIteration:
                self._current = None

    def collect(self) -> Graph:
        """Drain the context into an rdflib Graph."""
        return to_graph(self, self.settings)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.node.node_id})"


def unique(triples: Iterable[Triple], seen: set[Triple]) -> Iterator[Triple]:
    """Pass each triple through once; seen is the caller's fact set."""
    for triple in triples:
        if triple in seen:
            logger.debug("Dropping repeated triple %s", triple)
            continue
        seen.add(triple)
        yield triple


def to_graph(triples: Iterable[Triple], settings: Settings | None = None) -> Graph:
    """
    Collect triples into an rdflib Graph.

    Args:
        triples: Triples to add (drained)
        settings: Configuration whose namespace prefixes are bound

    Returns:
        Graph containing every triple
    """
    settings = settings or get_settings()
    graph = Graph()

    for prefix, namespace in settings.namespaces.prefixes.items():
        graph.bind(prefix, namespace)
    for triple in triples:
        graph.add(triple)

    logger.debug("Collected %d triples", len(graph))
    return graph
