from __future__ import annotations

import importlib
import logging
import logging.config
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from config import build_logging_config, get_settings_module

from .common.datetime_utils import format_value
from .container import Container, build_container
from .core.constants import TRANSIENT_ERROR_MESSAGE
from .core.exceptions import TransientStoreError
from .crud.controller import register_entity
from .crud.entity import read_attr
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Pass a ready ``container`` to run against other repositories (tests use
    in-memory fakes); otherwise one is built from the settings' DB_CONFIG.
    """

    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.config.dictConfig(build_logging_config(getattr(settings, "LOG_LEVEL", "INFO")))

    app = Flask(__name__, template_folder="../../../templates")
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

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

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            logger.info("Demo seed ready")

        container = build_container(db_config=db_config)

    app.jinja_env.globals["read_attr"] = read_attr
    app.add_template_filter(format_value, "display")

    for service in container.services:
        register_entity(app, container, service)

    entities = [service.entity for service in container.services]

    @app.context_processor
    def navigation():
        return {"nav_entities": entities}

    @app.route("/", endpoint="index")
    def index():
        return render_template("index.html", entities=entities)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify(status="ok")

    @app.errorhandler(404)
    def not_found(e):
        return render_template("error.html", code=404, message="Page not found"), 404

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return render_template("error.html", code=e.code, message=e.description), e.code
        if isinstance(e, TransientStoreError):
            logger.warning("Request %s %s failed: database unavailable", request.method, request.path)
            return render_template("error.html", code=503, message=TRANSIENT_ERROR_MESSAGE), 503
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return render_template("error.html", code=500, message="Something went wrong."), 500

    return app
