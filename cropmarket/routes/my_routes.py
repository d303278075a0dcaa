# cropmarket/routes/my_routes.py

from flask import Blueprint, request

from cropmarket.routes.responses import db_unavailable, get_service, result_response

my_bp = Blueprint("my_bp", __name__)


# GET crops by owner email
@my_bp.get("/my-crops")
def my_crops():
    service = get_service("projections")
    if service is None:
        return db_unavailable()

    return result_response(service.list_my_crops(request.args.get("email")))


# GET all interests sent by a user
@my_bp.get("/my-interests")
def my_interests():
    service = get_service("projections")
    if service is None:
        return db_unavailable()

    return result_response(service.list_my_interests(request.args.get("email")))
