# cropmarket/routes/responses.py

from typing import Optional

from flask import current_app, jsonify

from cropmarket.services.result import ErrorKind, ServiceResult


# ------------------------------------------------------------
# Helpers shared by all blueprints
# ------------------------------------------------------------
def get_service(name: str):
    """Returns the named service, or None when no store was wired at startup."""
    services = current_app.extensions.get("cropmarket") or {}
    return services.get(name)


def db_unavailable():
    current_app.logger.error("Request rejected: no crop store configured")
    return jsonify({"error": "Database not available"}), 500


def result_response(result: ServiceResult, conflict_status: Optional[int] = None):
    """
    Maps a ServiceResult to (json, status).
    Only internal failures are logged; the rest are expected outcomes.
    """
    if result.ok:
        return jsonify(result.value), 200

    status = result.kind.http_status
    if result.kind is ErrorKind.CONFLICT and conflict_status:
        status = conflict_status
    if result.kind is ErrorKind.INTERNAL:
        current_app.logger.error("%s: %s", result.error, result.detail)

    return jsonify({"error": result.error}), status
