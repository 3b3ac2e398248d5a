from __future__ import annotations

from typing import Iterable, Optional

from .model import Service


def active_services(services: Iterable[Service]) -> list[Service]:
    return [s for s in services if s.is_active]


def average_price(services: Iterable[Service]) -> float:
    active = active_services(services)
    if not active:
        return 0
    return sum(s.price for s in active) / len(active)


def average_duration(services: Iterable[Service]) -> float:
    active = active_services(services)
    if not active:
        return 0
    return sum(s.duration for s in active) / len(active)


def categories(services: Iterable[Service]) -> list[str]:
    return list(dict.fromkeys(s.category for s in services))


def search_services(services: Iterable[Service], *, search: str = "", category: Optional[str] = None) -> list[Service]:
    needle = search.lower()
    return [
        s
        for s in services
        if (needle in s.name.lower() or needle in s.description.lower())
        and (category is None or s.category == category)
    ]


def display_order(services: Iterable[Service]) -> list[Service]:
    """Active services first, then by category."""
    return sorted(services, key=lambda s: (not s.is_active, s.category.casefold()))


def total_duration(services: Iterable[Service], names: Iterable[str]) -> int:
    """Sum of catalog durations for the given service names (unknown names count 0)."""
    by_name = {s.name: s.duration for s in services}
    return sum(by_name.get(n, 0) for n in names)
