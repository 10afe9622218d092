"""
ldp-rdf - RDF projection of repository nodes.

Turns nodes of a hierarchical content store into Linked Data Platform
triples through composable RDF contexts:

- properties: the node's own properties
- references: inbound references, including Indirect Container membership
- containment: LDP membership for Basic/Direct/Indirect containers
- skolem: inlined descriptions of internally generated nodes
"""

__version__ = "0.1.0"
