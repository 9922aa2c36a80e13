"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from flask import Flask, g, request
from flask_cors import CORS

from retirecalc.app.api.routes import api_bp
from retirecalc.core.config import Settings, load_settings
from retirecalc.core.logging import logging_configured, set_request_id, setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    # a host process that already configured logging keeps its handlers
    if not logging_configured():
        setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    @app.before_request
    def _tag_request() -> None:
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
        set_request_id(g.request_id)

    @app.after_request
    def _log_response(response):
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        response.headers["X-Request-ID"] = g.get("request_id", "-")
        return response

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
