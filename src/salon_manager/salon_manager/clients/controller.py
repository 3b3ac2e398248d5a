from __future__ import annotations

from flask import Flask, request

from ..common.http import json_payload, record_fields, respond
from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Client

# Initialized by ClientService.add_client; a new client cannot bring them along
SERVER_MANAGED_FIELDS = ("last_visit", "total_visits", "total_spent", "history")


def register(app: Flask, container: Container) -> None:
    service = container.client_service

    @app.route("/api/clients", methods=["GET"], endpoint="list_clients")
    def list_clients():
        return respond(service.list_clients(search=request.args.get("search", "")))

    @app.route("/api/clients/stats", methods=["GET"], endpoint="client_stats")
    def client_stats():
        return respond(service.stats())

    @app.route("/api/clients/top", methods=["GET"], endpoint="top_clients")
    def top_clients():
        limit = request.args.get("limit", type=int)
        return respond(service.top_clients(limit=limit))

    @app.route("/api/clients/<client_id>", methods=["GET"], endpoint="get_client")
    def get_client(client_id: str):
        return respond(service.get_client(client_id))

    @app.route("/api/clients/<client_id>/history", methods=["GET"], endpoint="client_history")
    def client_history(client_id: str):
        return respond(service.history(client_id))

    @app.route("/api/clients", methods=["POST"], endpoint="add_client")
    def add_client():
        fields = record_fields(Client, json_payload())
        supplied = sorted(f for f in SERVER_MANAGED_FIELDS if f in fields)
        if supplied:
            raise ValidationError(f"Campos no permitidos al registrar: {', '.join(supplied)}")
        fields["name"] = require_non_empty(fields.get("name"), "Nombre")
        fields["phone"] = require_non_empty(fields.get("phone"), "Teléfono")
        return respond(service.add_client(**fields), 201)
