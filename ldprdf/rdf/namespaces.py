"""
RDF namespaces and expansion of stored (prefixed) names into URIs.
"""

from collections.abc import Mapping

from rdflib import Namespace, URIRef
from rdflib.namespace import RDF, XSD

# =============================================================================
# NAMESPACE DEFINITIONS
# =============================================================================

LDP = Namespace("http://www.w3.org/ns/ldp#")
FEDORA = Namespace("http://fedora.info/definitions/v4/repository#")

__all__ = ["LDP", "FEDORA", "RDF", "XSD", "NamespaceResolver"]


class NamespaceResolver:
    """
    Expands prefixed names ("dc:title") using a fixed prefix map.

    Names whose prefix is not in the map are taken to be absolute URIs
    already ("urn:x:y", "http://example.org/p"). A name without any colon
    cannot be resolved.
    """

    def __init__(self, prefixes: Mapping[str, str]):
        self.prefixes = dict(prefixes)

    def expand(self, name: str) -> URIRef:
        if ":" not in name:
            raise ValueError(f"Cannot resolve unqualified name: {name!r}")
        prefix, local = name.split(":", 1)
        if prefix in self.prefixes and not local.startswith("//"):
            return URIRef(self.prefixes[prefix] + local)
        return URIRef(name)

    def compact(self, uri: str) -> str:
        """Return the prefixed form of uri when a namespace matches it."""
        uri = str(uri)
        best = None
        for prefix, namespace in self.prefixes.items():
            if uri.startswith(namespace) and (best is None or len(namespace) > len(best[1])):
                best = (prefix, namespace)
        if best is None:
            return uri
        return f"{best[0]}:{uri[len(best[1]):]}"
