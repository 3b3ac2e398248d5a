from __future__ import annotations

from flask import Flask, request

from ..common.http import json_payload, record_fields, respond
from ..common.validators import require_non_empty, require_non_negative_int, require_number
from ..container import Container
from .model import Service


def register(app: Flask, container: Container) -> None:
    service = container.catalog_service

    @app.route("/api/services", methods=["GET"], endpoint="list_services")
    def list_services():
        return respond(
            service.list_services(
                search=request.args.get("search", ""),
                category=request.args.get("category") or None,
            )
        )

    @app.route("/api/services/categories", methods=["GET"], endpoint="service_categories")
    def service_categories():
        return respond(service.categories())

    @app.route("/api/services/stats", methods=["GET"], endpoint="service_stats")
    def service_stats():
        return respond(service.stats())

    @app.route("/api/services", methods=["POST"], endpoint="add_service")
    def add_service():
        fields = record_fields(Service, json_payload())
        fields["name"] = require_non_empty(fields.get("name"), "Nombre")
        fields["category"] = require_non_empty(fields.get("category"), "Categoría")
        fields["price"] = require_number(fields.get("price"), "Precio")
        fields["duration"] = require_non_negative_int(fields.get("duration"), "Duración")
        return respond(service.add_service(**fields), 201)

    @app.route("/api/services/<service_id>", methods=["PATCH"], endpoint="update_service")
    def update_service(service_id: str):
        fields = record_fields(Service, json_payload())
        return respond(service.update_service(service_id, **fields))

    @app.route("/api/services/<service_id>/toggle", methods=["POST"], endpoint="toggle_service")
    def toggle_service(service_id: str):
        return respond(service.toggle_active(service_id))
