# cropmarket/routes/interest_routes.py

from flask import Blueprint, current_app, request

from cropmarket.routes.responses import db_unavailable, get_service, result_response

interest_bp = Blueprint("interest_bp", __name__)


# ------------------------------------------------------------
# Submit interest (non-owner)
# ------------------------------------------------------------
@interest_bp.post("/crops/<crop_id>/interests")
def submit_interest(crop_id: str):
    service = get_service("interests")
    if service is None:
        return db_unavailable()

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}

    result = service.submit_interest(
        crop_id=crop_id,
        user_email=payload.get("userEmail"),
        user_name=payload.get("userName"),
        quantity=payload.get("quantity"),
        message=payload.get("message"),
    )
    return result_response(result, conflict_status=current_app.config.get("DUPLICATE_INTEREST_STATUS"))


# ------------------------------------------------------------
# Update interest status (owner only)
# ------------------------------------------------------------
@interest_bp.patch("/crops/<crop_id>/interests/<interest_id>")
def update_interest_status(crop_id: str, interest_id: str):
    service = get_service("interests")
    if service is None:
        return db_unavailable()

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}

    # caller identity is trusted as supplied
    requester = payload.get("email") or request.headers.get("X-User-Email")

    result = service.update_interest_status(
        crop_id=crop_id,
        interest_id=interest_id,
        status=payload.get("status"),
        requester_email=requester,
    )
    return result_response(result)
