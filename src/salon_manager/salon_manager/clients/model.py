from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ServiceHistory:
    """One past visit, embedded in (and owned by) a Client.

    ``services`` holds free-text service names, not catalog ids.
    """

    id: str
    date: date
    services: list[str]
    total: float
    notes: str
    photos: Optional[list[str]] = None


@dataclass(frozen=True)
class Client:
    """Entidad de dominio: clienta del salón.

    ``total_visits`` and ``total_spent`` are informational counters: they are
    set at creation and never recomputed from appointments or transactions.
    """

    id: str
    name: str
    phone: str
    notes: str
    last_visit: date
    total_visits: int
    total_spent: float
    preferences: list[str] = field(default_factory=list)
    history: list[ServiceHistory] = field(default_factory=list)
    email: Optional[str] = None
    photo: Optional[str] = None
    birthday: Optional[date] = None
