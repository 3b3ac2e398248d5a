from __future__ import annotations

import pytest

from src.salon_manager.salon_manager.catalog.model import Service
from src.salon_manager.salon_manager.core.enums import CollectionName
from src.salon_manager.salon_manager.core.exceptions import ValidationError
from src.salon_manager.salon_manager.store.collection import Collection
from src.salon_manager.salon_manager.store.ids import IdGenerator


class RecordingHook:
    def __init__(self):
        self.calls = []

    def __call__(self, name, records):
        self.calls.append((name, list(records)))


def _services() -> list[Service]:
    return [
        Service("s1", "Corte Dama", "Corte", 250, 45, "Corte personalizado", True),
        Service("s2", "Manicure", "Uñas", 200, 45, "", True),
    ]


@pytest.fixture
def hook():
    return RecordingHook()


@pytest.fixture
def services(hook):
    return Collection(
        CollectionName.SERVICES,
        Service,
        _services(),
        on_change=hook,
        ids=IdGenerator(clock=lambda: 1_700_000_000.0),
    )


def test_add_assigns_fresh_id_and_appends(services, hook):
    created = services.add(name="Pedicure", category="Uñas", price=250, duration=60)

    assert created.id == "1700000000000"
    assert services.get(created.id) == Service(created.id, "Pedicure", "Uñas", 250, 60, "", True)
    assert [s.id for s in services.all()] == ["s1", "s2", created.id]
    assert hook.calls[-1][0] == CollectionName.SERVICES
    assert hook.calls[-1][1] == services.all()


def test_add_ids_are_unique(services):
    a = services.add(name="A", category="X", price=1, duration=1)
    b = services.add(name="B", category="X", price=1, duration=1)
    assert a.id != b.id


def test_add_missing_required_field_is_validation_error(services, hook):
    with pytest.raises(ValidationError) as excinfo:
        services.add(name="Sin categoría")
    assert isinstance(excinfo.value.__cause__, TypeError)
    assert hook.calls == []


def test_update_merges_only_given_fields(services):
    updated = services.update("s1", price=300)

    assert updated.price == 300
    assert updated.name == "Corte Dama"
    assert updated.duration == 45
    assert updated.description == "Corte personalizado"


def test_update_keeps_insertion_order(services):
    services.update("s1", name="Corte Dama Premium")
    assert [s.id for s in services.all()] == ["s1", "s2"]


def test_update_missing_id_returns_none_and_does_not_write(services, hook):
    before = services.all()

    assert services.update("nope", price=1) is None
    assert services.all() == before
    assert hook.calls == []


def test_update_cannot_touch_id(services):
    with pytest.raises(ValidationError):
        services.update("s1", id="s9")


def test_unknown_fields_are_rejected(services):
    with pytest.raises(ValidationError):
        services.update("s1", colour="red")


def test_update_all_writes_once(services, hook):
    rows = services.update_all(is_active=False)

    assert all(not s.is_active for s in rows)
    assert len(hook.calls) == 1


def test_all_returns_snapshot(services):
    snapshot = services.all()
    services.add(name="Nuevo", category="Corte", price=10, duration=10)
    assert len(snapshot) == 2
    assert len(services) == 3
