"""
Node store contract and the in-memory reference adapter.
"""

from .base import NodeStoreView
from .loader import load_store, load_store_file
from .memory import InMemoryNodeStore, InMemoryStoreView, literal, reference
from .models import (
    CONTAINER_TYPES,
    SKOLEM_TYPE,
    ContainerPolicy,
    Node,
    Property,
    PropertyType,
    Value,
)

__all__ = [
    "NodeStoreView",
    "InMemoryNodeStore",
    "InMemoryStoreView",
    "load_store",
    "load_store_file",
    "literal",
    "reference",
    "CONTAINER_TYPES",
    "SKOLEM_TYPE",
    "ContainerPolicy",
    "Node",
    "Property",
    "PropertyType",
    "Value",
]
