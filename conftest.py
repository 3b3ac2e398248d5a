from __future__ import annotations

from datetime import datetime

import pytest

from src.salon_manager.salon_manager.container import build_container
from src.salon_manager.salon_manager.persistence.adapter import PersistenceAdapter
from src.salon_manager.salon_manager.storage.memory_storage import InMemoryStorage
from src.salon_manager.salon_manager.store.ids import IdGenerator
from src.salon_manager.salon_manager.store.record_store import RecordStore


class FixedClock:
    """Deterministic millisecond clock for id generation."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    # The demo dataset is centred on this week
    return datetime(2026, 1, 20, 9, 0, 0)


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def ids() -> IdGenerator:
    return IdGenerator(clock=FixedClock())


@pytest.fixture
def store(memory_storage, ids) -> RecordStore:
    return RecordStore.open(PersistenceAdapter(memory_storage), ids=ids)


@pytest.fixture
def container(memory_storage, ids):
    return build_container(storage=memory_storage, ids=ids)


@pytest.fixture
def app(monkeypatch, container):
    from src.salon_manager.salon_manager.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
