"""
Identifier Translator - converts between node paths and resource URIs.

Resource URIs are only ever produced here. Hash URIs are stored as children
of a "#" node: the node "/a/#/frag" is published as "<base>/a#frag", and
the "#" node "/a/#" itself as "<base>/a#".
"""

import logging
from abc import ABC, abstractmethod

from rdflib import URIRef

from ldprdf.config import get_settings
from ldprdf.exceptions import NodeNotFoundError
from ldprdf.store import Node, NodeStoreView

logger = logging.getLogger(__name__)

HASH_SEGMENT = "/#/"
HASH_NODE = "/#"


class IdentifierTranslator(ABC):
    """Bidirectional node identity <-> resource URI mapping."""

    @abstractmethod
    def to_uri(self, node_id: str) -> URIRef:
        """Return the resource URI of a node identity."""

    @abstractmethod
    def to_node_id(self, uri: str) -> str:
        """Return the node identity addressed by a resource URI."""

    def to_node(self, uri: str, view: NodeStoreView) -> Node:
        """Resolve a resource URI to a node within a store view."""
        return view.get_node(self.to_node_id(uri))


class DefaultIdentifierTranslator(IdentifierTranslator):
    """
    Maps node paths directly below a base URI.

    Example: with base "http://localhost:8080/rest" the node "/books/b1" is
    published as "http://localhost:8080/rest/books/b1".
    """

    def __init__(self, base_uri: str | None = None):
        """
        Initialize the translator.

        Args:
            base_uri: Base of all resource URIs (default from settings)
        """
        base = base_uri or get_settings().identifiers.base_uri
        self.base_uri = base.rstrip("/")

    def to_uri(self, node_id: str) -> URIRef:
        if not node_id.startswith("/"):
            raise NodeNotFoundError(node_id)
        if node_id.endswith(HASH_NODE):
            path = node_id[: -len(HASH_NODE)] + "#"
        else:
            path = node_id.replace(HASH_SEGMENT, "#")
        return URIRef(self.base_uri + path)

    def to_node_id(self, uri: str) -> str:
        uri = str(uri)
        if uri == self.base_uri:
            return "/"
        path = uri[len(self.base_uri):]
        if not uri.startswith(self.base_uri) or path[:1] not in ("/", "#"):
            logger.debug("URI %s is outside of %s", uri, self.base_uri)
            raise NodeNotFoundError(uri)

        if "#" in path:
            head, fragment = path.split("#", 1)
            path = head.rstrip("/") + (HASH_SEGMENT + fragment if fragment else HASH_NODE)
        return path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_uri={self.base_uri!r})"
