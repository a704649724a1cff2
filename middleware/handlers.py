"""
Global Flask error handling middleware.

All exceptions (custom or unexpected) are returned as JSON payloads:
{
    "error": true,
    "message": "Human readable message",
    "details": { ... optional context ... }
}
"""

import os
import traceback

from flask import jsonify
from werkzeug.exceptions import HTTPException

from middleware.errors import BaseAppError


def register_error_handlers(app):
    """Attach all JSON error handlers to a Flask app instance."""

    @app.errorhandler(BaseAppError)
    def handle_custom_error(err):
        """Handle custom, domain-specific errors."""
        if err.code >= 500:
            app.logger.error("%s: %s", err.__class__.__name__, err.message)
        else:
            app.logger.warning("%s: %s", err.__class__.__name__, err.message)
        response = jsonify(err.to_dict())
        response.status_code = err.code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        """Routing errors (404, 405, ...) keep their status code."""
        # Flask files HTTPException handlers by status code, so app errors
        # with a code other than BaseAppError's land here.
        if isinstance(err, BaseAppError):
            return handle_custom_error(err)
        payload = {"error": True, "message": err.description or err.name}
        return jsonify(payload), err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err):
        """Catch-all handler for unexpected exceptions."""
        app.logger.exception("Unhandled error")
        payload = {
            "error": True,
            "message": str(err) or "Unexpected internal error",
        }
        if app.debug or os.getenv("FLASK_DEBUG") == "1":
            payload["details"] = {"traceback": traceback.format_exc()}
        return jsonify(payload), 500
