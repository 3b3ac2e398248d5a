from __future__ import annotations

from flask import Flask

from ..common.http import respond
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.notification_service

    @app.route("/api/notifications", methods=["GET"], endpoint="list_notifications")
    def list_notifications():
        return respond(service.list_notifications())

    @app.route("/api/notifications/unread-count", methods=["GET"], endpoint="unread_notifications")
    def unread_notifications():
        return respond({"unread": service.unread_count()})

    @app.route("/api/notifications/<notification_id>/read", methods=["POST"], endpoint="mark_notification_read")
    def mark_notification_read(notification_id: str):
        return respond(service.mark_as_read(notification_id))

    @app.route("/api/notifications/read-all", methods=["POST"], endpoint="mark_all_notifications_read")
    def mark_all_notifications_read():
        return respond(service.mark_all_as_read())
