from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class InventoryItem:
    """Producto en inventario. ``quantity >= 0`` holds by convention only."""

    id: str
    name: str
    category: str
    quantity: int
    unit: str
    min_stock: int
    price: float
    last_purchase: date
