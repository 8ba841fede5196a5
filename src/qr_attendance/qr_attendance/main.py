from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from loguru import logger
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.datetime_utils import now_utc, to_iso
from .common.http import error_response
from .common.log import configure_logging
from .container import STORAGE_MYSQL, build_container
from .core.exceptions import DomainError, StorageError
from .database.bootstrap import apply_schema, list_tables
from .attendance.controller import register as register_attendance
from .instructors.controller import register as register_instructors
from .sessions.controller import register as register_sessions
from .students.controller import register as register_students

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    storage_backend = str(getattr(settings, "STORAGE_BACKEND", "memory"))
    db_config = dict(getattr(settings, "DB_CONFIG", {}) or {})

    logger.info("Starting qr-attendance (settings={}, storage={})", settings_module, storage_backend)

    if storage_backend.lower() == STORAGE_MYSQL:
        logger.info(
            "MySQL target {}@{}:{}/{}",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables={})", len(list_tables(db_config)))

    container = build_container(storage_backend=storage_backend, db_config=db_config)
    app.extensions["qr_attendance"] = container

    register_students(app, container)
    register_instructors(app, container)
    register_sessions(app, container)
    register_attendance(app, container)
    _register_error_handlers(app)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "timestamp": to_iso(now_utc())})

    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error_response(e)

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        logger.error("Record store error: {}", e)
        return error_response(e)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        return jsonify({"success": False, "error": "Internal", "message": "Internal server error"}), 500
