from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import AppointmentStatus


@dataclass(frozen=True)
class Appointment:
    """Cita agendada.

    ``client_name`` is denormalized from the client at booking time; ``time``
    is a zero-padded 24h ``HH:MM`` string so it sorts lexicographically.
    """

    id: str
    client_id: str
    client_name: str
    date: date
    time: str
    services: list[str] = field(default_factory=list)
    duration: int = 0
    status: AppointmentStatus = AppointmentStatus.PENDING
    notes: str = ""
    reminder: bool = True


@dataclass(frozen=True)
class DayAppointments:
    """Read-model: one day of the week view."""

    day: date
    appointments: list[Appointment]
