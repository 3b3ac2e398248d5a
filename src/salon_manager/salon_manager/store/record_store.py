from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from ..appointments.model import Appointment
from ..catalog.model import Service
from ..clients.model import Client
from ..core.enums import CollectionName
from ..finances.model import Transaction
from ..inventory.model import InventoryItem
from ..notifications.model import Notification
from ..persistence.adapter import PersistenceAdapter
from .collection import Collection
from .ids import IdGenerator
from .seed import seed_collections

logger = logging.getLogger(__name__)

MODELS: Mapping[CollectionName, type] = {
    CollectionName.CLIENTS: Client,
    CollectionName.APPOINTMENTS: Appointment,
    CollectionName.SERVICES: Service,
    CollectionName.TRANSACTIONS: Transaction,
    CollectionName.INVENTORY: InventoryItem,
    CollectionName.NOTIFICATIONS: Notification,
}


@dataclass(frozen=True)
class RecordStore:
    """Explicit state container holding the six collections.

    Owned by the application container and handed to every service; there is
    no module-level store.
    """

    clients: Collection[Client]
    appointments: Collection[Appointment]
    services: Collection[Service]
    transactions: Collection[Transaction]
    inventory: Collection[InventoryItem]
    notifications: Collection[Notification]

    def collection(self, name: CollectionName) -> Collection:
        return {
            CollectionName.CLIENTS: self.clients,
            CollectionName.APPOINTMENTS: self.appointments,
            CollectionName.SERVICES: self.services,
            CollectionName.TRANSACTIONS: self.transactions,
            CollectionName.INVENTORY: self.inventory,
            CollectionName.NOTIFICATIONS: self.notifications,
        }[name]

    @classmethod
    def open(
        cls,
        adapter: PersistenceAdapter,
        *,
        seed: Optional[Callable[[], Mapping[CollectionName, list]]] = None,
        ids: Optional[IdGenerator] = None,
    ) -> "RecordStore":
        """Load every collection, substituting seed data for absent ones.

        Seeded collections are not written back until their first mutation.
        """

        seed_data = (seed or seed_collections)()
        ids = ids or IdGenerator()

        def load(name: CollectionName) -> Collection:
            model = MODELS[name]
            records = adapter.load(name, model)
            if records is None:
                records = list(seed_data.get(name, []))
                logger.info("%s: no stored data, starting from %d seed records", name.value, len(records))
            else:
                logger.info("%s: loaded %d records", name.value, len(records))
            return Collection(name, model, records, on_change=adapter.save, ids=ids)

        return cls(
            clients=load(CollectionName.CLIENTS),
            appointments=load(CollectionName.APPOINTMENTS),
            services=load(CollectionName.SERVICES),
            transactions=load(CollectionName.TRANSACTIONS),
            inventory=load(CollectionName.INVENTORY),
            notifications=load(CollectionName.NOTIFICATIONS),
        )
