from __future__ import annotations

from datetime import date, datetime

import pytest

from src.salon_manager.salon_manager.clients.model import Client
from src.salon_manager.salon_manager.clients.queries import (
    active_clients,
    average_ticket,
    average_visits,
    by_last_visit,
    days_since,
    history_newest_first,
    search_clients,
    top_clients,
)
from src.salon_manager.salon_manager.clients.service import ClientService
from src.salon_manager.salon_manager.core.exceptions import NotFoundError
from src.salon_manager.salon_manager.store.seed import seed_clients


@pytest.fixture
def service(store):
    return ClientService(store)


def test_days_since_counts_whole_days():
    assert days_since(date(2026, 1, 15), datetime(2026, 1, 20, 9, 0)) == 5
    assert days_since(date(2026, 1, 20), datetime(2026, 1, 20, 23, 59)) == 0


def test_active_window_is_thirty_days_inclusive():
    client = seed_clients()[0]  # last visit 2026-01-15
    assert active_clients([client], datetime(2026, 2, 14, 12, 0)) == [client]
    assert active_clients([client], datetime(2026, 2, 15, 0, 0)) == []


def test_top_clients_by_total_spent():
    top = top_clients(seed_clients())
    assert [c.name for c in top] == [
        "Carmen Silva",
        "Laura Ramírez",
        "María González",
        "Ana Martínez",
        "Patricia López",
    ]
    assert len(top_clients(seed_clients(), limit=2)) == 2


def test_averages():
    assert average_visits(seed_clients()) == 27
    assert average_visits([]) == 0
    assert average_ticket(seed_clients()[0]) == 521
    assert average_ticket(Client("n", "Nueva", "1", "", date(2026, 1, 1), 0, 0)) == 0


def test_search_by_name_or_phone():
    assert [c.id for c in search_clients(seed_clients(), "laura")] == ["3"]
    assert [c.id for c in search_clients(seed_clients(), "0105")] == ["5"]


def test_by_last_visit_and_history_order():
    assert [c.id for c in by_last_visit(seed_clients())] == ["4", "2", "1", "3", "5"]
    maria = seed_clients()[0]
    dates = [h.date for h in history_newest_first(maria)]
    assert dates == sorted(dates, reverse=True)


def test_add_client_defaults(service, memory_storage):
    client = service.add_client(name="Sofía Ruiz", phone="+52 555-0199", today=date(2026, 1, 20))

    assert client.last_visit == date(2026, 1, 20)
    assert client.total_visits == 0
    assert client.total_spent == 0
    assert client.history == []
    assert client.email is None
    assert service.get_client(client.id) == client
    assert memory_storage.writes == ["salonClients"]


def test_counters_are_not_recomputed(store, service):
    from src.salon_manager.salon_manager.appointments.service import AppointmentService

    AppointmentService(store).add_appointment(client_id="1", date="2026-01-25", time="10:00", services=["Corte Dama"])
    assert service.get_client("1").total_visits == 24


def test_stats(service, fixed_now):
    stats = service.stats(now=fixed_now)
    assert stats.total == 5
    assert stats.active == 5
    assert stats.average_visits == 27


def test_get_missing_client(service):
    with pytest.raises(NotFoundError):
        service.get_client("404")
