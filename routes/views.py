"""API routes for per-post view counts.

Mounted under both ``/posts/views/<slug>`` and ``/api/posts/views/<slug>``;
the blog front-end calls the ``/api`` path. Store failures propagate to the
error middleware, which answers ``500 {"error": true, "message": ...}``.
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from services.views_service import ViewCounterService

views_bp = Blueprint("views", __name__)

UPDATED_MESSAGE = "View count updated!"
DISABLED_MESSAGE = "View counting is disabled in development mode."


def _service() -> ViewCounterService:
    return current_app.extensions["view_counter"]


@views_bp.post("/posts/views/<slug>")
@views_bp.post("/api/posts/views/<slug>")
def increment_views(slug: str):
    result = _service().increment(slug)
    if not result.applied:
        current_app.logger.info("Skipped view count for %r (development mode)", slug)
        return jsonify({"error": False, "message": DISABLED_MESSAGE}), 200

    current_app.logger.debug("View count for %r is now %s", slug, result.views)
    return jsonify({"error": False, "message": UPDATED_MESSAGE}), 200


@views_bp.get("/posts/views/<slug>")
@views_bp.get("/api/posts/views/<slug>")
def get_views(slug: str):
    views = _service().read(slug)
    return jsonify({"error": False, "slug": slug, "views": views}), 200
