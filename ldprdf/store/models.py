"""
Read-only views of stored nodes, properties and values.

These mirror what the node store hands out for one store view. Nothing in
ldprdf mutates them; the in-memory store builds new instances instead.
"""

from dataclasses import dataclass
from enum import Enum

from ldprdf.exceptions import InconsistentNodeError

SKOLEM_TYPE = "fedora:Skolem"


class PropertyType(str, Enum):
    """Storage type of a property."""

    LITERAL = "literal"
    REFERENCE = "reference"
    WEAK_REFERENCE = "weak_reference"
    PATH = "path"

    @property
    def is_reference(self) -> bool:
        return self is not PropertyType.LITERAL


class ContainerPolicy(str, Enum):
    """LDP container interaction model of a node."""

    NONE = "none"
    BASIC = "basic"
    DIRECT = "direct"
    INDIRECT = "indirect"


CONTAINER_TYPES = {
    "ldp:BasicContainer": ContainerPolicy.BASIC,
    "ldp:DirectContainer": ContainerPolicy.DIRECT,
    "ldp:IndirectContainer": ContainerPolicy.INDIRECT,
}


@dataclass(frozen=True)
class Value:
    """A single property value: a typed literal or a reference to a node."""

    lexical: str | None = None
    datatype: str = "xsd:string"
    target: str | None = None

    @classmethod
    def literal(cls, lexical, datatype: str = "xsd:string") -> "Value":
        if isinstance(lexical, bool):
            return cls(lexical=str(lexical).lower(), datatype="xsd:boolean")
        return cls(lexical=str(lexical), datatype=datatype)

    @classmethod
    def reference(cls, node_id: str) -> "Value":
        return cls(target=node_id)

    @property
    def is_reference(self) -> bool:
        return self.target is not None

    def __str__(self) -> str:
        return self.target if self.is_reference else f'"{self.lexical}"^^{self.datatype}'


@dataclass(frozen=True)
class Property:
    """A named, typed, possibly multi-valued property owned by one node."""

    name: str
    type: PropertyType
    values: tuple[Value, ...]
    multiple: bool = False
    owner_id: str = ""

    @property
    def value(self) -> Value | None:
        """First value, for single-valued properties."""
        return self.values[0] if self.values else None

    def references(self, node_id: str) -> bool:
        """Check whether any value of this property points at node_id."""
        return self.type.is_reference and any(v.target == node_id for v in self.values)


@dataclass(frozen=True)
class Node:
    """A stored node with its properties and tree position."""

    node_id: str
    types: tuple[str, ...] = ()
    properties: tuple[Property, ...] = ()
    parent_id: str | None = None
    child_ids: tuple[str, ...] = ()

    def get_property(self, name: str) -> Property | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    @property
    def is_skolem(self) -> bool:
        """Internally generated node without an externally assigned identity."""
        return SKOLEM_TYPE in self.types

    @property
    def container_policy(self) -> ContainerPolicy:
        policies = {CONTAINER_TYPES[t] for t in self.types if t in CONTAINER_TYPES}
        if len(policies) > 1:
            raise InconsistentNodeError(
                f"{self.node_id} declares conflicting container types: {sorted(p.value for p in policies)}"
            )
        return policies.pop() if policies else ContainerPolicy.NONE
