from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import DateLike, to_date, week_start
from ..core.enums import AppointmentStatus
from .model import Appointment, DayAppointments

NEXT_STATUS = {
    AppointmentStatus.PENDING: AppointmentStatus.CONFIRMED,
    AppointmentStatus.CONFIRMED: AppointmentStatus.COMPLETED,
}

TERMINAL_STATUSES = frozenset({AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED})


def _matches(apt: Appointment, *, search: str, status: Optional[AppointmentStatus]) -> bool:
    if search and search.lower() not in apt.client_name.lower():
        return False
    if status is not None and apt.status != status:
        return False
    return True


def appointments_for_date(
    appointments: Iterable[Appointment],
    day: DateLike,
    *,
    search: str = "",
    status: Optional[AppointmentStatus] = None,
) -> list[Appointment]:
    """Appointments on ``day`` ordered by time of day.

    ``search`` is a case-insensitive substring of the client name;
    ``status`` None means every status.
    """
    target = to_date(day)
    rows = [a for a in appointments if a.date == target and _matches(a, search=search, status=status)]
    rows.sort(key=lambda a: a.time)
    return rows


def week_days(anchor: DateLike) -> list[date]:
    start = week_start(anchor)
    return [start + timedelta(days=i) for i in range(7)]


def week_view(
    appointments: Iterable[Appointment],
    anchor: DateLike,
    *,
    search: str = "",
    status: Optional[AppointmentStatus] = None,
) -> list[DayAppointments]:
    snapshot = list(appointments)
    return [
        DayAppointments(day=day, appointments=appointments_for_date(snapshot, day, search=search, status=status))
        for day in week_days(anchor)
    ]


def pending_count(appointments: Iterable[Appointment]) -> int:
    return sum(1 for a in appointments if a.status == AppointmentStatus.PENDING)


def next_status(status: AppointmentStatus) -> Optional[AppointmentStatus]:
    return NEXT_STATUS.get(status)
