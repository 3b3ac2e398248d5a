from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional

from .appointments.service import AppointmentService
from .catalog.service import CatalogService
from .clients.service import ClientService
from .core.enums import CollectionName
from .core.exceptions import ValidationError
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .finances.service import FinanceService
from .inventory.service import InventoryService
from .notifications.service import NotificationService
from .persistence.adapter import PersistenceAdapter
from .storage.base import KeyValueStorage
from .storage.file_storage import JsonFileStorage
from .storage.memory_storage import InMemoryStorage
from .storage.mysql_storage import MySQLKeyValueStorage
from .store.ids import IdGenerator
from .store.record_store import RecordStore

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("file", "memory", "mysql")


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    adapter: PersistenceAdapter
    store: RecordStore

    client_service: ClientService
    appointment_service: AppointmentService
    catalog_service: CatalogService
    finance_service: FinanceService
    inventory_service: InventoryService
    notification_service: NotificationService
    dashboard_service: DashboardService


def build_storage(
    backend: str,
    *,
    storage_dir: Optional[str | Path] = None,
    db_config: Optional[dict] = None,
) -> KeyValueStorage:
    backend = (backend or "file").lower()
    if backend not in STORAGE_BACKENDS:
        raise ValidationError(f"STORAGE_BACKEND desconocido: {backend}")

    if backend == "memory":
        storage: KeyValueStorage = InMemoryStorage()
    elif backend == "mysql":
        storage = MySQLKeyValueStorage(DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {})))
    else:
        storage = JsonFileStorage(storage_dir or "instance/storage")

    logger.info("Using %s storage backend", backend)
    return storage


def build_container(
    *,
    storage: KeyValueStorage,
    seed: Optional[Callable[[], Mapping[CollectionName, list]]] = None,
    ids: Optional[IdGenerator] = None,
) -> Container:
    adapter = PersistenceAdapter(storage)
    store = RecordStore.open(adapter, seed=seed, ids=ids)

    return Container(
        storage=storage,
        adapter=adapter,
        store=store,
        client_service=ClientService(store),
        appointment_service=AppointmentService(store),
        catalog_service=CatalogService(store),
        finance_service=FinanceService(store),
        inventory_service=InventoryService(store),
        notification_service=NotificationService(store),
        dashboard_service=DashboardService(store),
    )
