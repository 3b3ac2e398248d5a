from __future__ import annotations

import logging
from typing import Optional

from ..catalog.queries import total_duration
from ..common.datetime_utils import DateLike, to_date
from ..core.enums import AppointmentStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..store.record_store import RecordStore
from . import queries
from .model import Appointment, DayAppointments

logger = logging.getLogger(__name__)


class AppointmentService:
    """Use case: agenda (day/week views, booking, status changes)."""

    def __init__(self, store: RecordStore):
        self._appointments = store.appointments
        self._clients = store.clients
        self._services = store.services

    def for_date(
        self,
        day: DateLike,
        *,
        search: str = "",
        status: Optional[AppointmentStatus] = None,
    ) -> list[Appointment]:
        return queries.appointments_for_date(self._appointments.all(), day, search=search, status=status)

    def week(
        self,
        anchor: DateLike,
        *,
        search: str = "",
        status: Optional[AppointmentStatus] = None,
    ) -> list[DayAppointments]:
        return queries.week_view(self._appointments.all(), anchor, search=search, status=status)

    def pending_count(self) -> int:
        return queries.pending_count(self._appointments.all())

    def get_appointment(self, appointment_id: str) -> Appointment:
        apt = self._appointments.get(appointment_id)
        if not apt:
            raise NotFoundError("Cita no encontrada")
        return apt

    def add_appointment(
        self,
        *,
        client_id: str,
        date: DateLike,
        time: str,
        services: list[str],
        duration: Optional[int] = None,
        client_name: Optional[str] = None,
        status: AppointmentStatus = AppointmentStatus.PENDING,
        notes: str = "",
        reminder: bool = True,
    ) -> Appointment:
        if client_name is None:
            client = self._clients.get(client_id)
            client_name = client.name if client else ""
        if duration is None:
            duration = total_duration(self._services.all(), services)

        apt = self._appointments.add(
            client_id=client_id,
            client_name=client_name,
            date=to_date(date),
            time=time,
            services=list(services),
            duration=int(duration),
            status=AppointmentStatus(status),
            notes=notes,
            reminder=bool(reminder),
        )
        logger.info("Appointment %s booked for %s on %s %s", apt.id, apt.client_name, apt.date, apt.time)
        return apt

    def update_appointment(self, appointment_id: str, **changes) -> Appointment:
        updated = self._appointments.update(appointment_id, **changes)
        if updated is None:
            raise NotFoundError("Cita no encontrada")
        logger.info("Appointment %s updated (%s)", appointment_id, ", ".join(sorted(changes)))
        return updated

    def set_status(self, appointment_id: str, status: AppointmentStatus) -> Appointment:
        return self.update_appointment(appointment_id, status=AppointmentStatus(status))

    def advance_status(self, appointment_id: str) -> Appointment:
        """pending -> confirmed -> completed, one step at a time."""
        apt = self.get_appointment(appointment_id)
        nxt = queries.next_status(apt.status)
        if nxt is None:
            raise ValidationError("La cita ya no puede avanzar de estado")
        return self.set_status(appointment_id, nxt)

    def cancel(self, appointment_id: str) -> Appointment:
        apt = self.get_appointment(appointment_id)
        if apt.status in queries.TERMINAL_STATUSES:
            raise ValidationError("La cita ya está cerrada")
        return self.set_status(appointment_id, AppointmentStatus.CANCELLED)
