from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Type, TypeVar

from ..core.constants import STORAGE_KEYS
from ..core.enums import CollectionName
from ..storage.base import KeyValueStorage
from .codec import dumps_records, loads_records

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PersistenceAdapter:
    """Loads and saves whole collections through a key-value storage.

    ``load`` returns None for "not found"; an unreadable stored value is
    treated the same way so the caller falls back to seed data.  ``save``
    always writes the full sequence.
    """

    def __init__(self, storage: KeyValueStorage, *, keys: Optional[Mapping[CollectionName, str]] = None):
        self._storage = storage
        self._keys = dict(keys or STORAGE_KEYS)

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    def key_for(self, collection: CollectionName) -> str:
        return self._keys[collection]

    def load(self, collection: CollectionName, model: Type[T]) -> Optional[list[T]]:
        key = self.key_for(collection)
        try:
            raw = self._storage.get(key)
        except Exception:
            logger.warning("Could not read %s from storage", key, exc_info=True)
            return None

        if raw is None:
            return None

        try:
            return loads_records(model, raw)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Stored value for %s is unreadable, ignoring it: %s", key, e)
            return None

    def save(self, collection: CollectionName, records: Iterable[object]) -> None:
        key = self.key_for(collection)
        payload = dumps_records(records)
        self._storage.set(key, payload)
        logger.debug("Saved %s (%d bytes)", key, len(payload))
