from __future__ import annotations

from typing import Iterable

from .model import Notification


def unread_count(notifications: Iterable[Notification]) -> int:
    return sum(1 for n in notifications if not n.read)


def newest_first(notifications: Iterable[Notification]) -> list[Notification]:
    return sorted(notifications, key=lambda n: n.date, reverse=True)
