"""System endpoints (health check)."""

from flask import Blueprint, current_app, jsonify

from middleware.errors import BaseAppError

system_bp = Blueprint("system", __name__)


@system_bp.route("/health", methods=["GET"])
def health_check():
    """Simple health-check route; reports the store status without failing."""
    try:
        current_app.extensions["view_counter"].store.ping()
        db_status = "ok"
    except BaseAppError as e:
        current_app.logger.warning("Health check could not reach the store: %s", e.message)
        db_status = f"error: {e.message}"

    return jsonify({
        "status": "ok",
        "database": db_status,
    }), 200
