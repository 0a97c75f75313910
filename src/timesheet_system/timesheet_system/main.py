from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from config import get_settings_module, load_settings

from .common.network import get_local_ip
from .container import Container, build_container
from .core.constants import DEFAULT_PORT
from .database.bootstrap import apply_schema, ensure_default_projects, ensure_demo_users, list_tables
from .database.connection import DBConfig
from .entries.controller import register as register_entries
from .projects.controller import register as register_projects
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None, *, settings_overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    overrides = dict(settings_overrides or {})

    def setting(name: str, default=None):
        return overrides.get(name, getattr(settings, name, default))

    app.secret_key = setting("SECRET_KEY")
    app.config["DEBUG"] = bool(setting("DEBUG", False))
    app.config["TESTING"] = bool(setting("TESTING", False))
    app.config["PORT"] = int(setting("PORT", DEFAULT_PORT))
    logging.basicConfig(level=logging.DEBUG if app.config["DEBUG"] else logging.INFO)

    if container is None:
        db_config = setting("DB_CONFIG")
        logger.info("settings=%s db=%s", get_settings_module(), DBConfig.from_dict(db_config).describe())

        if bool(setting("AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            ensure_default_projects(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(setting("AUTO_SEED_DB", False)):
            ensure_demo_users(db_config)
            logger.info("Demo users ready")

        container = build_container(
            db_config=db_config,
            admin_password=setting("ADMIN_PASSWORD"),
            first_tier=float(setting("BUDGET_FIRST_TIER")),
            second_tier=float(setting("BUDGET_SECOND_TIER")),
            advisory_hours=float(setting("ADVISORY_DAILY_HOURS")),
        )

    register_users(app, container)
    register_entries(app, container)
    register_projects(app, container)
    register_reports(app, container)

    @app.route("/network-info", methods=["GET"], endpoint="network_info")
    def network_info():
        ip = get_local_ip()
        port = int(request.environ.get("SERVER_PORT") or app.config["PORT"])
        return jsonify(
            {
                "ip": ip,
                "port": port,
                "urls": [f"http://{ip}:{port}", f"http://localhost:{port}"],
            }
        )

    return app
