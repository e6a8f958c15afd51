"""Application factory and app-wide configuration."""

import uuid
from http import HTTPStatus
from typing import Optional

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from million_calculator.app.api.routes import api_bp
from million_calculator.config import Settings, get_settings
from million_calculator.log import get_logger, set_request_id
from million_calculator.storage import LeadStore, build_lead_store

logger = get_logger(__name__)

_FROM_SETTINGS = object()


def create_app(settings: Optional[Settings] = None, lead_store=_FROM_SETTINGS) -> Flask:
    """Build the Flask app instance.

    ``lead_store`` defaults to the store described by ``settings``; pass
    ``None`` to disable persistence or a ``LeadStore`` to inject one.
    """
    settings = settings or get_settings()

    app = Flask(__name__)
    app.config["APP_ENV"] = settings.APP_ENV

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    store: Optional[LeadStore] = (
        build_lead_store(settings) if lead_store is _FROM_SETTINGS else lead_store
    )
    app.extensions["lead_store"] = store

    @app.before_request
    def _bind_request_id() -> None:
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        set_request_id(g.request_id)

    @app.after_request
    def _echo_request_id(response):
        response.headers["X-Request-ID"] = g.get("request_id", "-")
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        """Generic fallback for anything the routes did not handle."""
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("unhandled error on %s %s", request.method, request.path)
        body = {
            "error": "Ops, algo deu errado!",
            "message": "Desculpe, encontramos um erro inesperado.",
        }
        return jsonify(body), HTTPStatus.INTERNAL_SERVER_ERROR

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(
        "app ready env=%s lead_store=%s",
        settings.APP_ENV,
        type(store).__name__ if store is not None else "none",
    )
    return app
