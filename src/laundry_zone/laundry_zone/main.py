from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.controller import register as register_api
from .api.errors import register_error_handlers
from .auth.controller import register as register_auth
from .catalog.controller import register as register_catalog
from .common.logger import get_logger, setup_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .employees.controller import register as register_employees
from .finance.controller import register as register_finance
from .orders.controller import register as register_orders
from .statistics.controller import register as register_statistics
from .users.controller import register as register_customers

logger = get_logger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"

SETTING_NAMES = (
    "SECRET_KEY",
    "JWT_SECRET",
    "TOKEN_TTL_HOURS",
    "DB_CONFIG",
    "API_PREFIX",
    "PORT",
    "DEBUG",
    "LOG_LEVEL",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
)


def load_settings(override: Optional[Mapping[str, Any]] = None) -> dict:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name, None) for name in SETTING_NAMES}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(override or {})
    return settings


def _bootstrap_database(db_config: dict, *, init: bool, seed: bool) -> None:
    if init:
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if seed:
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_demo_users(db_config)
        logger.info("Demo seed ready")


def create_app(
    settings_override: Optional[Mapping[str, Any]] = None,
    container: Optional[Container] = None,
) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(settings_override)
    setup_logging(settings.get("LOG_LEVEL") or "INFO")

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG"))
    prefix = (settings.get("API_PREFIX") or "").rstrip("/")

    db_config = settings["DB_CONFIG"]
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings["SETTINGS_MODULE"],
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        _bootstrap_database(
            db_config,
            init=bool(settings.get("AUTO_INIT_DB")),
            seed=bool(settings.get("AUTO_SEED_DB")),
        )
        container = build_container(
            db_config=db_config,
            jwt_secret=settings["JWT_SECRET"],
            token_ttl_hours=int(settings.get("TOKEN_TTL_HOURS") or 24),
        )

    register_error_handlers(app)
    register_api(app, container, prefix=prefix)
    register_auth(app, container, prefix=prefix)
    register_customers(app, container, prefix=prefix)
    register_catalog(app, container, prefix=prefix)
    register_employees(app, container, prefix=prefix)
    register_orders(app, container, prefix=prefix)
    register_finance(app, container, prefix=prefix)
    register_statistics(app, container, prefix=prefix)

    return app
