from __future__ import annotations

from flask import Flask, request

from ..common.http import json_payload, record_fields, respond
from ..common.validators import require_non_empty, require_non_negative_int, require_number
from ..container import Container
from ..core.exceptions import ValidationError
from .model import InventoryItem


def register(app: Flask, container: Container) -> None:
    service = container.inventory_service

    @app.route("/api/inventory", methods=["GET"], endpoint="list_inventory")
    def list_inventory():
        return respond(
            service.list_items(
                search=request.args.get("search", ""),
                category=request.args.get("category") or None,
            )
        )

    @app.route("/api/inventory/low-stock", methods=["GET"], endpoint="low_stock")
    def low_stock():
        return respond(service.low_stock())

    @app.route("/api/inventory/stats", methods=["GET"], endpoint="inventory_stats")
    def inventory_stats():
        return respond(
            {
                "totalValue": service.total_value(),
                "lowStock": len(service.low_stock()),
                "categories": service.categories(),
            }
        )

    @app.route("/api/inventory", methods=["POST"], endpoint="add_inventory_item")
    def add_inventory_item():
        fields = record_fields(InventoryItem, json_payload())
        fields["name"] = require_non_empty(fields.get("name"), "Nombre")
        fields["category"] = require_non_empty(fields.get("category"), "Categoría")
        fields["quantity"] = require_non_negative_int(fields.get("quantity"), "Cantidad")
        fields["min_stock"] = require_non_negative_int(fields.get("min_stock"), "Stock mínimo")
        fields["price"] = require_number(fields.get("price"), "Precio")
        return respond(service.add_item(**fields), 201)

    @app.route("/api/inventory/<item_id>", methods=["PATCH"], endpoint="update_inventory_item")
    def update_inventory_item(item_id: str):
        fields = record_fields(InventoryItem, json_payload())
        return respond(service.update_item(item_id, **fields))

    @app.route("/api/inventory/<item_id>/adjust", methods=["POST"], endpoint="adjust_inventory_item")
    def adjust_inventory_item(item_id: str):
        delta = json_payload().get("delta")
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError("delta debe ser un número entero")
        return respond(service.adjust_quantity(item_id, delta))
