from __future__ import annotations


def test_list_clients_uses_camel_case(client):
    res = client.get("/api/clients")

    assert res.status_code == 200
    body = res.get_json()
    assert len(body) == 5
    assert body[0]["name"] == "Carmen Silva"
    assert "lastVisit" in body[0]
    assert "totalSpent" in body[0]


def test_search_clients(client):
    body = client.get("/api/clients?search=laura").get_json()
    assert [c["id"] for c in body] == ["3"]


def test_add_client_requires_name_and_phone(client, memory_storage):
    res = client.post("/api/clients", json={"name": "  ", "phone": "555"})

    assert res.status_code == 400
    assert "error" in res.get_json()
    assert memory_storage.writes == []


def test_add_client(client):
    res = client.post("/api/clients", json={"name": "Sofía Ruiz", "phone": "+52 555-0199", "preferences": ["Uñas"]})

    assert res.status_code == 201
    body = res.get_json()
    assert body["totalVisits"] == 0
    assert body["preferences"] == ["Uñas"]
    assert client.get(f"/api/clients/{body['id']}").status_code == 200


def test_client_id_cannot_be_supplied(client):
    res = client.post("/api/clients", json={"id": "1", "name": "X", "phone": "1"})
    assert res.status_code == 400


def test_appointments_for_date(client):
    body = client.get("/api/appointments?date=2026-01-21").get_json()
    assert [a["id"] for a in body] == ["a3", "a4"]
    assert body[0]["clientName"] == "Laura Ramírez"


def test_appointments_bad_filters(client):
    assert client.get("/api/appointments?date=21-01-2026").status_code == 400
    assert client.get("/api/appointments?status=archived").status_code == 400


def test_week_view(client):
    body = client.get("/api/appointments/week?date=2026-01-20").get_json()
    assert len(body) == 7
    assert body[0]["day"] == "2026-01-19"
    assert len(body[1]["appointments"]) == 2


def test_book_and_advance_appointment(client):
    res = client.post(
        "/api/appointments",
        json={"clientId": "2", "date": "2026-01-24", "time": "12:00", "services": ["Manicure"]},
    )
    assert res.status_code == 201
    apt = res.get_json()
    assert apt["status"] == "pending"
    assert apt["duration"] == 45

    res = client.post(f"/api/appointments/{apt['id']}/advance")
    assert res.get_json()["status"] == "confirmed"


def test_update_missing_appointment_is_404(client):
    res = client.patch("/api/appointments/nope", json={"time": "11:00"})
    assert res.status_code == 404


def test_set_status_validation(client):
    assert client.post("/api/appointments/a1/status", json={"status": "lost"}).status_code == 400
    res = client.post("/api/appointments/a1/status", json={"status": "completed"})
    assert res.get_json()["status"] == "completed"
    assert client.post("/api/appointments/a1/cancel").status_code == 400


def test_toggle_service(client):
    res = client.post("/api/services/s2/toggle")
    assert res.status_code == 200
    assert res.get_json()["isActive"] is False


def test_add_service_validation(client):
    assert client.post("/api/services", json={"name": "X", "category": "", "price": 1, "duration": 1}).status_code == 400
    res = client.post("/api/services", json={"name": "Lifting", "category": "Pestañas", "price": 500, "duration": 60})
    assert res.status_code == 201
    assert res.get_json()["isActive"] is True


def test_add_transaction_and_month_summary(client):
    res = client.post(
        "/api/transactions",
        json={"date": "2026-01-25", "type": "expense", "amount": 100, "category": "Renta", "description": "Renta"},
    )
    assert res.status_code == 201

    summary = client.get("/api/finances/summary?month=2026-01-01").get_json()
    assert summary["expense"] == 2800
    assert summary["net"] == summary["income"] - summary["expense"]

    breakdown = client.get("/api/finances/breakdown?month=2026-01-01").get_json()
    assert breakdown["Renta"] == 100


def test_transaction_amount_must_be_positive(client):
    res = client.post(
        "/api/transactions",
        json={"date": "2026-01-25", "type": "income", "amount": 0, "category": "Servicios", "description": "x"},
    )
    assert res.status_code == 400


def test_trend(client):
    body = client.get("/api/finances/trend?today=2026-01-20").get_json()
    assert [p["label"] for p in body] == ["ago", "sep", "oct", "nov", "dic", "ene"]


def test_inventory_update_moves_item_into_low_stock(client):
    assert "i1" not in [i["id"] for i in client.get("/api/inventory/low-stock").get_json()]

    res = client.patch("/api/inventory/i1", json={"quantity": 5})

    assert res.status_code == 200
    assert res.get_json()["minStock"] == 5
    assert "i1" in [i["id"] for i in client.get("/api/inventory/low-stock").get_json()]


def test_inventory_adjust(client):
    res = client.post("/api/inventory/i6/adjust", json={"delta": -10})
    assert res.get_json()["quantity"] == 0
    assert client.post("/api/inventory/i6/adjust", json={"delta": "1"}).status_code == 400


def test_notifications_read_flow(client):
    assert client.get("/api/notifications/unread-count").get_json() == {"unread": 3}
    assert client.post("/api/notifications/n1/read").get_json()["read"] is True
    assert client.post("/api/notifications/n9/read").status_code == 404
    client.post("/api/notifications/read-all")
    assert client.get("/api/notifications/unread-count").get_json() == {"unread": 0}


def test_dashboard(client):
    res = client.get("/api/dashboard")
    assert res.status_code == 200
    body = res.get_json()
    assert {"todayAppointments", "pendingAppointments", "month", "lowStock", "unreadNotifications", "topClients"} <= set(body)
    assert "net" in body["month"]


def test_non_json_body_is_400(client):
    res = client.post("/api/clients", data="name=x")
    assert res.status_code == 400


def test_null_for_required_field_is_rejected_without_write(client, memory_storage):
    assert client.patch("/api/appointments/a1", json={"date": None}).status_code == 400
    assert client.patch("/api/inventory/i1", json={"quantity": None}).status_code == 400
    res = client.post(
        "/api/appointments",
        json={"clientId": "2", "date": "2026-01-24", "time": "12:00", "services": None},
    )
    assert res.status_code == 400
    assert memory_storage.writes == []


def test_edits_survive_reload_after_rejected_null(client, memory_storage):
    from src.salon_manager.salon_manager.container import build_container

    client.patch("/api/appointments/a1", json={"date": None})
    client.patch("/api/inventory/i1", json={"quantity": None})
    assert client.patch("/api/appointments/a2", json={"notes": "keep me"}).status_code == 200
    assert client.patch("/api/inventory/i1", json={"quantity": 3}).status_code == 200

    reloaded = build_container(storage=memory_storage).store
    assert reloaded.appointments.get("a1").date.isoformat() == "2026-01-20"
    assert reloaded.appointments.get("a2").notes == "keep me"
    assert reloaded.inventory.get("i1").quantity == 3


def test_fractional_quantity_is_rejected(client):
    assert client.patch("/api/inventory/i1", json={"quantity": 5.9}).status_code == 400
    assert client.patch("/api/appointments/a1", json={"duration": 90.5}).status_code == 400
    assert client.get("/api/inventory").status_code == 200


def test_appointment_time_must_be_hh_mm(client):
    res = client.post(
        "/api/appointments",
        json={"clientId": "2", "date": "2026-02-02", "time": "9:30", "services": []},
    )
    assert res.status_code == 400
    assert client.patch("/api/appointments/a1", json={"time": "9:30"}).status_code == 400

    client.post("/api/appointments", json={"clientId": "2", "date": "2026-02-02", "time": "10:00", "services": []})
    client.post("/api/appointments", json={"clientId": "2", "date": "2026-02-02", "time": "09:30", "services": []})
    body = client.get("/api/appointments?date=2026-02-02").get_json()
    assert [a["time"] for a in body] == ["09:30", "10:00"]


def test_new_client_cannot_bring_counters_or_history(client, memory_storage):
    for extra in ({"totalVisits": 10}, {"totalSpent": 5000}, {"lastVisit": "2025-01-01"}, {"history": []}):
        res = client.post("/api/clients", json={"name": "Sofía", "phone": "555", **extra})
        assert res.status_code == 400
    assert memory_storage.writes == []
