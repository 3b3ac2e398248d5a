from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import today_local
from ..common.http import json_payload, query_date, query_enum, record_fields, respond
from ..common.validators import require_non_empty, require_positive_number
from ..container import Container
from ..core.enums import TransactionType
from ..core.exceptions import ValidationError
from .model import Transaction


def register(app: Flask, container: Container) -> None:
    service = container.finance_service

    @app.route("/api/transactions", methods=["GET"], endpoint="list_transactions")
    def list_transactions():
        return respond(service.list_transactions(month=query_date("month")))

    @app.route("/api/transactions", methods=["POST"], endpoint="add_transaction")
    def add_transaction():
        fields = record_fields(Transaction, json_payload())
        if fields.get("type") is None:
            raise ValidationError("Tipo es obligatorio")
        fields["amount"] = require_positive_number(fields.get("amount"), "Monto")
        fields["category"] = require_non_empty(fields.get("category"), "Categoría")
        fields["description"] = require_non_empty(fields.get("description"), "Descripción")
        fields.setdefault("date", today_local())
        return respond(service.add_transaction(**fields), 201)

    @app.route("/api/finances/summary", methods=["GET"], endpoint="finance_summary")
    def finance_summary():
        return respond(service.monthly_summary(query_date("month")))

    @app.route("/api/finances/trend", methods=["GET"], endpoint="finance_trend")
    def finance_trend():
        return respond(service.trend(today=query_date("today")))

    @app.route("/api/finances/breakdown", methods=["GET"], endpoint="finance_breakdown")
    def finance_breakdown():
        tx_type = query_enum(TransactionType, "type") or TransactionType.EXPENSE
        return respond(service.category_breakdown(query_date("month"), tx_type=tx_type))
