from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from ..core.constants import ACTIVE_CLIENT_DAYS, TOP_CLIENTS_LIMIT
from .model import Client, ServiceHistory


def days_since(day: date, now: datetime) -> int:
    """Whole days elapsed from midnight of ``day`` until ``now``."""
    elapsed = now - datetime.combine(day, datetime.min.time())
    return elapsed.days


def is_active(client: Client, now: datetime, *, window_days: int = ACTIVE_CLIENT_DAYS) -> bool:
    return days_since(client.last_visit, now) <= window_days


def active_clients(clients: Iterable[Client], now: datetime) -> list[Client]:
    return [c for c in clients if is_active(c, now)]


def top_clients(clients: Iterable[Client], *, limit: int = TOP_CLIENTS_LIMIT) -> list[Client]:
    ranked = sorted(clients, key=lambda c: c.total_spent, reverse=True)
    return ranked[:limit]


def average_visits(clients: Iterable[Client]) -> int:
    rows = list(clients)
    if not rows:
        return 0
    return round(sum(c.total_visits for c in rows) / len(rows))


def average_ticket(client: Client) -> int:
    if not client.total_visits:
        return 0
    return round(client.total_spent / client.total_visits)


def search_clients(clients: Iterable[Client], query: str) -> list[Client]:
    """Case-insensitive name match, or plain substring of the phone."""
    needle = query.lower()
    return [c for c in clients if needle in c.name.lower() or query in c.phone]


def by_last_visit(clients: Iterable[Client]) -> list[Client]:
    return sorted(clients, key=lambda c: c.last_visit, reverse=True)


def history_newest_first(client: Client) -> list[ServiceHistory]:
    return sorted(client.history, key=lambda h: h.date, reverse=True)
