from src.salon_manager.salon_manager.core.enums import CollectionName
from src.salon_manager.salon_manager.notifications.model import Notification
from src.salon_manager.salon_manager.persistence.adapter import PersistenceAdapter
from src.salon_manager.salon_manager.storage.file_storage import JsonFileStorage
from src.salon_manager.salon_manager.store.seed import seed_notifications


def test_missing_key_returns_none(tmp_path):
    storage = JsonFileStorage(tmp_path / "storage")
    assert storage.get("salonClients") is None
    assert storage.keys() == []


def test_set_get_and_keys(tmp_path):
    storage = JsonFileStorage(tmp_path)
    storage.set("salonServices", "[]")
    storage.set("salonClients", '[{"id": "1"}]')

    assert storage.get("salonClients") == '[{"id": "1"}]'
    assert storage.keys() == ["salonClients", "salonServices"]
    assert not list(tmp_path.glob("*.tmp"))


def test_non_ascii_content_survives_through_adapter(tmp_path):
    adapter = PersistenceAdapter(JsonFileStorage(tmp_path))
    records = seed_notifications()

    adapter.save(CollectionName.NOTIFICATIONS, records)

    assert "Cumpleaños" in (tmp_path / "salonNotifications.json").read_text(encoding="utf-8")
    assert adapter.load(CollectionName.NOTIFICATIONS, Notification) == records
