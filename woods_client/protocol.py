"""JSON snapshot codec for the simulation channel.

A snapshot is a JSON array of ``[entity_id, [component, ...]]`` pairs where
each component is a single-key object ``{"<Tag>": {...fields}}``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Set

from .components import component_for_tag
from .entities import Entity
from .errors import DecodeError


def decode_snapshot(message: str) -> List[Entity]:
    """Parse a raw snapshot ``message`` into a fresh list of entities.

    Any structural problem rejects the whole snapshot. Components with a tag
    this client does not know are skipped.
    """

    try:
        payload = json.loads(message, parse_constant=_reject_constant)
    except (TypeError, RecursionError, json.JSONDecodeError) as exc:
        raise DecodeError("Snapshot is not valid JSON") from exc
    if not isinstance(payload, list):
        raise DecodeError("Snapshot must be a JSON array")

    entities: List[Entity] = []
    seen: Set[int] = set()
    for item in payload:
        entity = _decode_entity(item)
        if entity.id in seen:
            raise DecodeError(f"Duplicate entity id {entity.id}")
        seen.add(entity.id)
        entities.append(entity)
    return entities


def _reject_constant(token: str) -> Any:
    raise DecodeError(f"Snapshot contains non-JSON number {token}")


def _decode_entity(item: Any) -> Entity:
    if not isinstance(item, list) or len(item) != 2:
        raise DecodeError("Snapshot entry must be an [id, components] pair")
    entity_id, components = item
    if isinstance(entity_id, bool) or not isinstance(entity_id, int):
        raise DecodeError(f"Entity id must be an integer, got {entity_id!r}")
    if not isinstance(components, list):
        raise DecodeError(f"Components of entity {entity_id} must be an array")

    entity = Entity(id=entity_id)
    for tagged in components:
        if not isinstance(tagged, dict) or len(tagged) != 1:
            raise DecodeError(f"Component of entity {entity_id} must have exactly one tag")
        (tag, data), = tagged.items()
        component_cls = component_for_tag(tag)
        if component_cls is None:
            logging.debug("Ignoring unknown component %r on entity %s", tag, entity_id)
            continue
        entity.set_component(component_cls.from_payload(data))
    return entity


def encode_snapshot(entities: Iterable[Entity]) -> str:
    """Encode ``entities`` in the snapshot wire format."""

    return json.dumps(
        [
            [entity.id, [component.to_payload() for component in entity.components.values()]]
            for entity in entities
        ]
    )
