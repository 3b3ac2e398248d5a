from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, to_date, today_local
from ..core.exceptions import NotFoundError
from ..store.record_store import RecordStore
from . import queries
from .model import InventoryItem

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, store: RecordStore):
        self._inventory = store.inventory

    def list_items(self, *, search: str = "", category: Optional[str] = None) -> list[InventoryItem]:
        rows = queries.filter_items(self._inventory.all(), search=search, category=category)
        return queries.display_order(rows)

    def low_stock(self) -> list[InventoryItem]:
        return queries.low_stock_items(self._inventory.all())

    def total_value(self) -> float:
        return queries.total_value(self._inventory.all())

    def categories(self) -> list[str]:
        return queries.categories(self._inventory.all())

    def add_item(
        self,
        *,
        name: str,
        category: str,
        quantity: int,
        min_stock: int,
        price: float,
        unit: str = "unidades",
        last_purchase: Optional[DateLike] = None,
    ) -> InventoryItem:
        item = self._inventory.add(
            name=name,
            category=category,
            quantity=int(quantity),
            unit=unit,
            min_stock=int(min_stock),
            price=price,
            last_purchase=to_date(last_purchase) if last_purchase else today_local(),
        )
        logger.info("Inventory item %s added (%s)", item.id, item.name)
        return item

    def update_item(self, item_id: str, **changes) -> InventoryItem:
        updated = self._inventory.update(item_id, **changes)
        if updated is None:
            raise NotFoundError("Producto no encontrado")
        if queries.is_low_stock(updated):
            logger.info("Inventory item %s is low on stock (%s <= %s)", item_id, updated.quantity, updated.min_stock)
        return updated

    def adjust_quantity(self, item_id: str, delta: int) -> InventoryItem:
        """Add ``delta`` units, never going below zero."""
        current = self._inventory.get(item_id)
        if not current:
            raise NotFoundError("Producto no encontrado")
        return self.update_item(item_id, quantity=max(0, current.quantity + int(delta)))
