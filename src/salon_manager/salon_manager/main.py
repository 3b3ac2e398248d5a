from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .appointments.controller import register as register_appointments
from .catalog.controller import register as register_catalog
from .clients.controller import register as register_clients
from .container import Container, build_container, build_storage
from .core.exceptions import NotFoundError, ValidationError
from .core.logging_config import setup_logging
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .finances.controller import register as register_finances
from .inventory.controller import register as register_inventory
from .notifications.controller import register as register_notifications

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))
    logger.info("Starting salon manager with settings=%s", settings_module)

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", "file")
        db_config = getattr(settings, "DB_CONFIG", {})
        if backend == "mysql" and getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        storage = build_storage(
            backend,
            storage_dir=getattr(settings, "STORAGE_DIR", None),
            db_config=db_config,
        )
        container = build_container(storage=storage)

    app.extensions["salon_container"] = container

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    register_clients(app, container)
    register_appointments(app, container)
    register_catalog(app, container)
    register_finances(app, container)
    register_inventory(app, container)
    register_notifications(app, container)
    register_dashboard(app, container)

    return app
