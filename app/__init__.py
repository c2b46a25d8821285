# app/__init__.py
from __future__ import annotations

import logging
import os
from typing import Optional

from flask import Flask, render_template

from app.config import Config
from app.extensions import CREDENTIALS_KEY, STORAGE_KEY
from app.storage import StorageConfig, ensure_data_files
from app.utils_auth import StaticCredentialVerifier


def create_app(test_config: Optional[dict] = None) -> Flask:
    app = Flask(
        __name__,
        static_folder=os.getenv("FLASK_STATIC_FOLDER", "static"),
        template_folder=os.getenv("FLASK_TEMPLATES_FOLDER", "templates"),
    )

    # -----------------------------------------------------------
    # CONFIG GENERAL
    # -----------------------------------------------------------
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    # -----------------------------------------------------------
    # DATOS + CREDENCIALES ADMIN
    # -----------------------------------------------------------
    storage = StorageConfig.from_dir(app.config["DATA_DIR"])
    ensure_data_files(storage)
    app.extensions[STORAGE_KEY] = storage
    app.extensions[CREDENTIALS_KEY] = StaticCredentialVerifier(
        app.config["ADMIN_USER"], app.config["ADMIN_PASS"]
    )

    # -----------------------------------------------------------
    # BLUEPRINTS
    # -----------------------------------------------------------
    from app.routes import register_routes
    register_routes(app)

    # -----------------------------------------------------------
    # HEALTHCHECK + 404
    # -----------------------------------------------------------
    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    @app.errorhandler(404)
    def not_found(_e):
        return render_template("404.html", title="Not Found"), 404

    return app
