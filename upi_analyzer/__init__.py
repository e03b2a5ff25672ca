"""
Application factory: config, logging, JSON error handlers and blueprints.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask, Response, jsonify

from upi_analyzer.config import Config
from upi_analyzer.utils.log import configure_logging


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.json.sort_keys = False

    configure_logging(app.config["LOG_LEVEL"])

    # ── Error handlers ──────────────────────────────────────────────────────

    @app.errorhandler(400)
    def bad_request(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Bad Request", "message": str(exc)}), 400

    @app.errorhandler(404)
    def not_found(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Not Found", "message": str(exc)}), 404

    @app.errorhandler(405)
    def method_not_allowed(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Method Not Allowed", "message": str(exc)}), 405

    @app.errorhandler(422)
    def unprocessable(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Unprocessable Entity", "message": str(exc)}), 422

    @app.errorhandler(500)
    def internal_error(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Internal Server Error", "message": str(exc)}), 500

    # ── Register blueprints ─────────────────────────────────────────────────

    from upi_analyzer.routes.transactions import transactions_bp
    from upi_analyzer.routes.performance import performance_bp

    base = app.config["API_BASE"]
    app.register_blueprint(transactions_bp, url_prefix=base)
    app.register_blueprint(performance_bp, url_prefix=base)

    return app

