"""
Fixture loader - builds an InMemoryNodeStore from a YAML document.

Format::

    nodes:
      /books:
        types: [ldp:DirectContainer]
        properties:
          dc:title: Books                      # single literal
          dc:subject: [fiction, poetry]        # multi-valued literal
          ldp:hasMemberRelation: dcterms:hasPart
          dc:extent: {datatype: xsd:integer, values: [320]}
      /books/b1:
        properties:
          fedora:memberOf: {type: reference, values: [/books]}
    denied:
      anonymous: [/books/b1]

Nodes are created shortest path first, so parents may be listed after their
children.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from ldprdf.exceptions import RepositoryError

from .memory import InMemoryNodeStore
from .models import Property, PropertyType, Value

logger = logging.getLogger(__name__)


def _parse_property(name: str, spec: Any) -> Property:
    """Parse one property entry of a fixture node."""
    if not isinstance(spec, dict):
        spec = {"values": spec}

    try:
        prop_type = PropertyType(spec.get("type", PropertyType.LITERAL.value))
    except ValueError:
        raise RepositoryError(f"Unknown property type for {name}: {spec.get('type')}") from None

    raw = spec.get("values", spec.get("value"))
    raw_values = raw if isinstance(raw, list) else [raw]
    raw_values = [v for v in raw_values if v is not None]

    if prop_type.is_reference:
        values = tuple(Value.reference(str(v)) for v in raw_values)
    else:
        datatype = spec.get("datatype", "xsd:string")
        values = tuple(Value.literal(v, datatype) for v in raw_values)

    return Property(
        name=name,
        type=prop_type,
        values=values,
        multiple=bool(spec.get("multiple", len(values) > 1)),
    )


def load_store(data: dict[str, Any]) -> InMemoryNodeStore:
    """
    Build a store from an already parsed fixture document.

    Args:
        data: Mapping with "nodes" and optional "denied" sections

    Returns:
        Populated InMemoryNodeStore
    """
    store = InMemoryNodeStore()
    nodes = data.get("nodes") or {}

    for node_id in sorted(nodes, key=lambda n: (n.rstrip("/").count("/"), n)):
        node_spec = nodes[node_id] or {}
        properties = [
            _parse_property(name, spec)
            for name, spec in (node_spec.get("properties") or {}).items()
        ]
        if node_id == "/":
            for prop in properties:
                store.set_property("/", prop)
            continue
        store.add_node(node_id, types=node_spec.get("types") or (), properties=properties)

    for user_id, node_ids in (data.get("denied") or {}).items():
        for node_id in node_ids:
            store.deny(user_id, node_id)

    logger.info("Loaded fixture store with %d nodes", len(store))
    return store


def load_store_file(path: str | Path) -> InMemoryNodeStore:
    """Load a YAML fixture file into a new store."""
    fixture = Path(path)
    if not fixture.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture}")

    with open(fixture, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return load_store(data)
