from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import today_local
from ..common.http import json_payload, query_date, query_enum, record_fields, respond
from ..common.validators import require_non_empty, require_time_hhmm
from ..container import Container
from ..core.enums import AppointmentStatus
from ..core.exceptions import ValidationError
from .model import Appointment


def register(app: Flask, container: Container) -> None:
    service = container.appointment_service

    def _filters() -> dict:
        return {
            "search": request.args.get("search", ""),
            "status": query_enum(AppointmentStatus, "status"),
        }

    @app.route("/api/appointments", methods=["GET"], endpoint="list_appointments")
    def list_appointments():
        day = query_date("date") or today_local()
        return respond(service.for_date(day, **_filters()))

    @app.route("/api/appointments/week", methods=["GET"], endpoint="week_appointments")
    def week_appointments():
        anchor = query_date("date") or today_local()
        return respond(service.week(anchor, **_filters()))

    @app.route("/api/appointments/pending-count", methods=["GET"], endpoint="pending_appointments")
    def pending_appointments():
        return respond({"pending": service.pending_count()})

    @app.route("/api/appointments/<appointment_id>", methods=["GET"], endpoint="get_appointment")
    def get_appointment(appointment_id: str):
        return respond(service.get_appointment(appointment_id))

    @app.route("/api/appointments", methods=["POST"], endpoint="add_appointment")
    def add_appointment():
        fields = record_fields(Appointment, json_payload())
        fields["client_id"] = require_non_empty(fields.get("client_id"), "Clienta")
        fields["time"] = require_time_hhmm(fields.get("time"), "Hora")
        if not fields.get("date"):
            raise ValidationError("Fecha es obligatorio")
        fields.setdefault("services", [])
        return respond(service.add_appointment(**fields), 201)

    @app.route("/api/appointments/<appointment_id>", methods=["PATCH"], endpoint="update_appointment")
    def update_appointment(appointment_id: str):
        fields = record_fields(Appointment, json_payload())
        if "time" in fields:
            fields["time"] = require_time_hhmm(fields["time"], "Hora")
        return respond(service.update_appointment(appointment_id, **fields))

    @app.route("/api/appointments/<appointment_id>/status", methods=["POST"], endpoint="set_appointment_status")
    def set_appointment_status(appointment_id: str):
        raw = json_payload().get("status")
        try:
            status = AppointmentStatus(raw)
        except ValueError as e:
            raise ValidationError(f"Estado inválido: {raw}") from e
        return respond(service.set_status(appointment_id, status))

    @app.route("/api/appointments/<appointment_id>/advance", methods=["POST"], endpoint="advance_appointment")
    def advance_appointment(appointment_id: str):
        return respond(service.advance_status(appointment_id))

    @app.route("/api/appointments/<appointment_id>/cancel", methods=["POST"], endpoint="cancel_appointment")
    def cancel_appointment(appointment_id: str):
        return respond(service.cancel(appointment_id))
