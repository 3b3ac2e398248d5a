from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import NotFoundError
from ..store.record_store import RecordStore
from . import queries
from .model import Service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogStats:
    active: int
    average_price: int
    average_duration: int


class CatalogService:
    def __init__(self, store: RecordStore):
        self._services = store.services

    def list_services(self, *, search: str = "", category: Optional[str] = None) -> list[Service]:
        rows = queries.search_services(self._services.all(), search=search, category=category)
        return queries.display_order(rows)

    def categories(self) -> list[str]:
        return queries.categories(self._services.all())

    def stats(self) -> CatalogStats:
        rows = self._services.all()
        return CatalogStats(
            active=len(queries.active_services(rows)),
            average_price=round(queries.average_price(rows)),
            average_duration=round(queries.average_duration(rows)),
        )

    def add_service(
        self,
        *,
        name: str,
        category: str,
        price: float,
        duration: int,
        description: str = "",
        is_active: bool = True,
    ) -> Service:
        service = self._services.add(
            name=name,
            category=category,
            price=price,
            duration=int(duration),
            description=description,
            is_active=bool(is_active),
        )
        logger.info("Service %s added (%s)", service.id, service.name)
        return service

    def update_service(self, service_id: str, **changes) -> Service:
        updated = self._services.update(service_id, **changes)
        if updated is None:
            raise NotFoundError("Servicio no encontrado")
        logger.info("Service %s updated (%s)", service_id, ", ".join(sorted(changes)))
        return updated

    def toggle_active(self, service_id: str) -> Service:
        current = self._services.get(service_id)
        if not current:
            raise NotFoundError("Servicio no encontrado")
        return self.update_service(service_id, is_active=not current.is_active)
