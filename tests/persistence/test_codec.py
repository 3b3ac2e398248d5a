from __future__ import annotations

import json
from datetime import date, datetime

import pytest

from src.salon_manager.salon_manager.clients.model import Client
from src.salon_manager.salon_manager.core.enums import AppointmentStatus, CollectionName, NotificationType, TransactionType
from src.salon_manager.salon_manager.core.exceptions import ValidationError
from src.salon_manager.salon_manager.appointments.model import Appointment
from src.salon_manager.salon_manager.finances.model import Transaction
from src.salon_manager.salon_manager.inventory.model import InventoryItem
from src.salon_manager.salon_manager.notifications.model import Notification
from src.salon_manager.salon_manager.persistence.codec import (
    decode_fields,
    dumps_records,
    encode_record,
    loads_records,
    to_camel,
)
from src.salon_manager.salon_manager.store.record_store import MODELS
from src.salon_manager.salon_manager.store.seed import seed_collections


def test_to_camel():
    assert to_camel("min_stock") == "minStock"
    assert to_camel("is_active") == "isActive"
    assert to_camel("name") == "name"


@pytest.mark.parametrize("name", list(CollectionName))
def test_seed_collections_survive_encode_decode(name):
    records = seed_collections()[name]
    assert loads_records(MODELS[name], dumps_records(records)) == records


def test_encoded_shape_uses_camel_case_iso_dates_and_enum_tags():
    apt = Appointment("a1", "1", "María González", date(2026, 1, 20), "10:00", ["Corte"], 45, AppointmentStatus.CONFIRMED, "", True)
    data = encode_record(apt)

    assert data["clientId"] == "1"
    assert data["clientName"] == "María González"
    assert data["date"] == "2026-01-20"
    assert data["status"] == "confirmed"


def test_absent_optionals_are_omitted_not_null():
    tx = Transaction("t1", date(2026, 1, 12), TransactionType.EXPENSE, 250, "Gastos", "Internet")
    data = encode_record(tx)
    assert "clientId" not in data
    assert "appointmentId" not in data

    client = Client("9", "Sin email", "555", "", date(2026, 1, 1), 0, 0)
    assert "email" not in encode_record(client)
    assert "birthday" not in encode_record(client)


def test_notification_timestamp_and_low_stock_tag():
    n = Notification("n2", NotificationType.LOW_STOCK, "Stock bajo", "Shampoo", datetime(2026, 1, 19, 14, 0))
    data = encode_record(n)
    assert data["type"] == "lowStock"
    assert data["date"] == "2026-01-19T14:00:00"
    assert loads_records(Notification, json.dumps([data])) == [n]


def test_loads_records_requires_array():
    with pytest.raises(ValueError):
        loads_records(Notification, '{"id": "n1"}')


def test_decode_fields_accepts_camel_case_partial_payload():
    fields = decode_fields(Appointment, {"clientId": "2", "date": "2026-01-21", "status": "pending"})
    assert fields == {"client_id": "2", "date": date(2026, 1, 21), "status": AppointmentStatus.PENDING}


def test_decode_fields_rejects_unknown_keys_and_bad_values():
    with pytest.raises(ValidationError):
        decode_fields(Appointment, {"colour": "red"})
    with pytest.raises(ValidationError):
        decode_fields(Appointment, {"status": "archived"})
    with pytest.raises(ValidationError):
        decode_fields(Appointment, {"date": "20/01/2026"})


def test_decode_fields_rejects_null_for_required_fields():
    with pytest.raises(ValidationError):
        decode_fields(Appointment, {"date": None})
    with pytest.raises(ValidationError):
        decode_fields(Appointment, {"services": None})
    with pytest.raises(ValidationError):
        decode_fields(InventoryItem, {"quantity": None})


def test_decode_fields_accepts_null_for_optional_fields():
    assert decode_fields(Client, {"email": None}) == {"email": None}
    assert decode_fields(Transaction, {"clientId": None}) == {"client_id": None}


def test_int_fields_reject_fractional_numbers():
    with pytest.raises(ValidationError):
        decode_fields(InventoryItem, {"quantity": 5.9})
    with pytest.raises(ValidationError):
        decode_fields(Appointment, {"duration": 90.5})
    assert decode_fields(InventoryItem, {"quantity": 5.0}) == {"quantity": 5}
    assert isinstance(decode_fields(InventoryItem, {"quantity": 5.0})["quantity"], int)


def test_wrong_container_or_scalar_types_are_rejected():
    with pytest.raises(ValidationError):
        decode_fields(Appointment, {"services": "Corte"})
    with pytest.raises(ValidationError):
        decode_fields(Appointment, {"services": ["Corte", None]})
    with pytest.raises(ValidationError):
        decode_fields(Client, {"name": 42})
    with pytest.raises(ValidationError):
        decode_fields(Client, {"history": ["h1"]})


def test_decode_error_keeps_original_cause():
    with pytest.raises(ValidationError) as excinfo:
        decode_fields(Appointment, {"status": "archived"})
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_stored_null_in_required_field_is_unreadable():
    text = json.dumps([{"id": "i1", "name": "Tinte", "category": "Tintes", "quantity": None, "unit": "unidades",
                        "minStock": 5, "price": 120, "lastPurchase": "2026-01-18"}])
    with pytest.raises(TypeError):
        loads_records(InventoryItem, text)
