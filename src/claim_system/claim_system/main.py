from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .claims.controller import register as register_claims
from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_MAX_CONTENT_LENGTH, DEFAULT_UPLOAD_DIR
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .reporting.controller import register as register_reporting

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Flask app factory.

    Pass a ready container to skip database bootstrap (used by tests).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", DEFAULT_MAX_CONTENT_LENGTH))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            logger.info("Demo seed ready")

        upload_dir = Path(getattr(settings, "UPLOAD_DIR", DEFAULT_UPLOAD_DIR))
        if not upload_dir.is_absolute():
            upload_dir = REPO_ROOT / upload_dir
        container = build_container(db_config=db_config, upload_dir=str(upload_dir))

    register_error_handlers(app)
    register_claims(app, container)
    register_reporting(app, container)

    return app
