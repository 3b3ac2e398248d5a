from __future__ import annotations

import logging

from ..core.exceptions import NotFoundError
from ..store.record_store import RecordStore
from . import queries
from .model import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, store: RecordStore):
        self._notifications = store.notifications

    def list_notifications(self) -> list[Notification]:
        return queries.newest_first(self._notifications.all())

    def unread_count(self) -> int:
        return queries.unread_count(self._notifications.all())

    def mark_as_read(self, notification_id: str) -> Notification:
        updated = self._notifications.update(notification_id, read=True)
        if updated is None:
            raise NotFoundError("Notificación no encontrada")
        return updated

    def mark_all_as_read(self) -> list[Notification]:
        rows = self._notifications.update_all(read=True)
        logger.info("Marked %d notifications as read", len(rows))
        return rows
