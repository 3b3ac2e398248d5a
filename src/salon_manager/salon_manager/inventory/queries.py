from __future__ import annotations

from typing import Iterable, Optional

from .model import InventoryItem


def is_low_stock(item: InventoryItem) -> bool:
    return item.quantity <= item.min_stock


def low_stock_items(items: Iterable[InventoryItem]) -> list[InventoryItem]:
    return [i for i in items if is_low_stock(i)]


def stock_fill_ratio(item: InventoryItem) -> float:
    """Display heuristic: quantity against twice the minimum, clamped to [0, 1]."""
    capacity = item.min_stock * 2
    if capacity <= 0:
        return 1.0 if item.quantity > 0 else 0.0
    return min(max(item.quantity / capacity, 0.0), 1.0)


def total_value(items: Iterable[InventoryItem]) -> float:
    return sum((i.quantity * i.price for i in items), 0)


def categories(items: Iterable[InventoryItem]) -> list[str]:
    return list(dict.fromkeys(i.category for i in items))


def filter_items(items: Iterable[InventoryItem], *, search: str = "", category: Optional[str] = None) -> list[InventoryItem]:
    needle = search.lower()
    return [
        i
        for i in items
        if needle in i.name.lower() and (category is None or i.category == category)
    ]


def display_order(items: Iterable[InventoryItem]) -> list[InventoryItem]:
    """Low-stock items first, then alphabetical by name."""
    return sorted(items, key=lambda i: (not is_low_stock(i), i.name.casefold()))
