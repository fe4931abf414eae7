from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .activity.controller import register as register_activity
from .attendance.controller import register as register_attendance
from .common.web import IsoJSONProvider, fail
from .container import Container, build_container
from .core.constants import DEFAULT_PAGE_SIZE, DEFAULT_SESSION_DAYS
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_admin_account, list_tables
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .shifts.controller import register as register_shifts

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _prepare_database(settings, db_config: dict) -> None:
    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))

    if getattr(settings, "AUTO_SEED_DB", False):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        email = getattr(settings, "ADMIN_EMAIL", "")
        password = getattr(settings, "ADMIN_PASSWORD", "")
        if email and password:
            ensure_admin_account(db_config, email=email, password=password)
        else:
            logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD not set; skipping admin account")


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    When ``container`` is given the database is left untouched, which is
    how the tests run the app over in-memory repositories.
    """

    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.json = IsoJSONProvider(app)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = DEFAULT_SESSION_DAYS * 24 * 60 * 60

    if container is None:
        db_config = dict(getattr(settings, "DB_CONFIG"))
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        _prepare_database(settings, db_config)
        container = build_container(
            db_config=db_config,
            page_size=int(getattr(settings, "PAGE_SIZE", DEFAULT_PAGE_SIZE)),
        )

    register_employees(app, container)
    register_shifts(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_activity(app, container)
    register_dashboard(app, container)

    @app.errorhandler(404)
    def not_found(_):
        return fail("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_):
        return fail("Method not allowed", 405)

    return app
