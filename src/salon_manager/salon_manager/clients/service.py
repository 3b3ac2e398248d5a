from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError
from ..store.record_store import RecordStore
from . import queries
from .model import Client, ServiceHistory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientStats:
    total: int
    active: int
    average_visits: int


class ClientService:
    """Use case: client records (register, search, ranking)."""

    def __init__(self, store: RecordStore):
        self._clients = store.clients

    def list_clients(self, *, search: str = "") -> list[Client]:
        rows = self._clients.all()
        if search:
            rows = queries.search_clients(rows, search)
        return queries.by_last_visit(rows)

    def get_client(self, client_id: str) -> Client:
        client = self._clients.get(client_id)
        if not client:
            raise NotFoundError("Clienta no encontrada")
        return client

    def add_client(
        self,
        *,
        name: str,
        phone: str,
        notes: str = "",
        email: Optional[str] = None,
        birthday: Optional[date] = None,
        photo: Optional[str] = None,
        preferences: Optional[list[str]] = None,
        today: Optional[date] = None,
    ) -> Client:
        client = self._clients.add(
            name=name,
            phone=phone,
            notes=notes,
            email=email,
            birthday=birthday,
            photo=photo,
            preferences=list(preferences or []),
            history=[],
            last_visit=today or now_local().date(),
            total_visits=0,
            total_spent=0,
        )
        logger.info("Client %s registered (%s)", client.id, client.name)
        return client

    def history(self, client_id: str) -> list[ServiceHistory]:
        return queries.history_newest_first(self.get_client(client_id))

    def top_clients(self, *, limit: Optional[int] = None) -> list[Client]:
        if limit is None:
            return queries.top_clients(self._clients.all())
        return queries.top_clients(self._clients.all(), limit=limit)

    def stats(self, *, now: Optional[datetime] = None) -> ClientStats:
        now = now or now_local()
        rows = self._clients.all()
        return ClientStats(
            total=len(rows),
            active=len(queries.active_clients(rows, now)),
            average_visits=queries.average_visits(rows),
        )
