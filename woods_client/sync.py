"""Apply inbound snapshots to the entity store."""

from __future__ import annotations

import logging

from .entities import EntityStore
from .errors import DecodeError
from .protocol import decode_snapshot


class SnapshotSync:
    """Channel handler that decodes each message and replaces the store state.

    A malformed snapshot is dropped and the previously applied one stays
    visible.
    """

    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self.rejected = 0

    def __call__(self, message: str) -> None:
        try:
            entities = decode_snapshot(message)
        except DecodeError as exc:
            self.rejected += 1
            logging.warning("Dropping malformed snapshot: %s", exc)
            return
        self.store.apply(entities)
