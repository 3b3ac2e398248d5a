from __future__ import annotations

from flask import Flask

from ..common.http import respond
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        return respond(container.dashboard_service.summary())
