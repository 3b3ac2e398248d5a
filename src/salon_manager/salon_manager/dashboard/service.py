from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..appointments import queries as appointment_queries
from ..appointments.model import Appointment
from ..clients import queries as client_queries
from ..clients.model import Client
from ..common.datetime_utils import now_local
from ..finances import queries as finance_queries
from ..finances.model import MonthlySummary
from ..inventory import queries as inventory_queries
from ..inventory.model import InventoryItem
from ..notifications import queries as notification_queries
from ..store.record_store import RecordStore


@dataclass(frozen=True)
class DashboardSummary:
    """Read-model for the landing page."""

    today_appointments: list[Appointment]
    pending_appointments: int
    month: MonthlySummary
    low_stock: list[InventoryItem]
    unread_notifications: int
    top_clients: list[Client]
    total_clients: int
    active_clients: int


class DashboardService:
    def __init__(self, store: RecordStore):
        self._store = store

    def summary(self, *, now: Optional[datetime] = None) -> DashboardSummary:
        now = now or now_local()
        today = now.date()
        store = self._store

        appointments = store.appointments.all()
        clients = store.clients.all()
        return DashboardSummary(
            today_appointments=appointment_queries.appointments_for_date(appointments, today),
            pending_appointments=appointment_queries.pending_count(appointments),
            month=finance_queries.monthly_summary(store.transactions.all(), today),
            low_stock=inventory_queries.low_stock_items(store.inventory.all()),
            unread_notifications=notification_queries.unread_count(store.notifications.all()),
            top_clients=client_queries.top_clients(clients),
            total_clients=len(clients),
            active_clients=len(client_queries.active_clients(clients, now)),
        )
