"""Flask application configuration and blueprint registration."""

from __future__ import annotations

from typing import Any, Dict

from flask import Flask, jsonify

from medtranslate.logger import get_logger
from medtranslate.translation.pipeline import TranslationPipeline

from .routes.translation import translation_bp

logger = get_logger(__name__)


def build_app(config: Dict[str, Any], pipeline: TranslationPipeline) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Ensure JSON responses keep Unicode data.
    app.json.ensure_ascii = False

    # Built once at startup, read-only for every request
    app.extensions["medtranslate_config"] = config
    app.extensions["translation_pipeline"] = pipeline

    register_blueprints(app)
    register_default_routes(app)
    register_error_handlers(app)

    return app


def register_blueprints(app: Flask) -> None:
    """Register Flask blueprints."""
    app.register_blueprint(translation_bp, url_prefix="/api")


def register_default_routes(app: Flask) -> None:
    """Register default health route."""

    @app.get("/health")
    def health_check():
        logger.debug("Health check requested")
        return jsonify({"status": "ok"})


def register_error_handlers(app: Flask) -> None:
    """JSON error responses; internal details are never returned to the client."""

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        allowed = ", ".join(getattr(e, "valid_methods", None) or [])
        return jsonify({"error": "Method not allowed"}), 405, {"Allow": allowed}

    @app.errorhandler(500)
    def internal_error(e):
        logger.exception("Internal server error: %s", e)
        return jsonify({"error": "Translation failed"}), 500
