from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .container import Container, build_container
from .core.constants import DEFAULT_HOURLY_RATE, DEFAULT_INVOICE_DUE_DAYS
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_teacher, list_tables
from .invoices.controller import register as register_invoices
from .payments.controller import register as register_payments
from .students.controller import register as register_students
from .users.controller import register as register_users

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_HOURLY_RATE"] = float(getattr(settings, "DEFAULT_HOURLY_RATE", DEFAULT_HOURLY_RATE))

    if container is None:
        if app.config["DEBUG"]:
            app.logger.info(
                "settings=%s db=%s@%s:%s/%s",
                settings_module,
                db_config.get("user"),
                db_config.get("host"),
                db_config.get("port", 3306),
                db_config.get("database"),
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_teacher(db_config)
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            app.logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            invoice_due_days=int(getattr(settings, "INVOICE_DUE_DAYS", DEFAULT_INVOICE_DUE_DAYS)),
        )

    register_users(app, container)
    register_classes(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_invoices(app, container)
    register_payments(app, container)

    return app
