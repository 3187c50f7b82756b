from __future__ import annotations

import importlib
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, ensure_default_settings

from .container import build_container
from .anomaly.controller import register as register_anomaly
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings

LOG_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"


def configure_logging(app: Flask, *, log_dir: str, level: str) -> None:
    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(os.path.join(log_dir, "geoattend.log"), maxBytes=2_000_000, backupCount=5)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)

    package_logger = logging.getLogger(__package__)
    for target in (app.logger, package_logger):
        target.addHandler(handler)
        target.setLevel(level)


def register_routes(app: Flask, container) -> None:
    register_employees(app, container)
    register_settings(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_anomaly(app, container)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(
        app,
        log_dir=getattr(settings, "LOG_DIR", "logs"),
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
    )
    app.logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_default_settings(db_config)
        app.logger.info("Default office settings ready")

    container = build_container(
        db_config=db_config,
        office_timezone=getattr(settings, "OFFICE_TIMEZONE", None),
        recent_log_limit=int(getattr(settings, "RECENT_LOG_LIMIT", 5)),
        history_limit=int(getattr(settings, "ANOMALY_HISTORY_LIMIT", 30)),
    )
    register_routes(app, container)

    return app
