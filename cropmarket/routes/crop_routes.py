# cropmarket/routes/crop_routes.py

from flask import Blueprint, request

from cropmarket.routes.responses import db_unavailable, get_service, result_response

# ======================================================
# CROP CATALOG BLUEPRINT  →  {API_PREFIX}/crops/*
# ======================================================
crop_bp = Blueprint("crop_bp", __name__)


def _catalog():
    return get_service("catalog")


# ------------------  LIST (type? limit?) ------------------
@crop_bp.get("/crops")
def list_crops():
    catalog = _catalog()
    if catalog is None:
        return db_unavailable()

    result = catalog.list_crops(
        crop_type=request.args.get("type"),
        limit=request.args.get("limit"),
    )
    return result_response(result)


# ------------------  SINGLE CROP ------------------
@crop_bp.get("/crops/<crop_id>")
def get_crop(crop_id: str):
    catalog = _catalog()
    if catalog is None:
        return db_unavailable()

    return result_response(catalog.get_crop(crop_id))


# ------------------  CREATE ONE OR MANY ------------------
@crop_bp.post("/crops")
def create_crops():
    catalog = _catalog()
    if catalog is None:
        return db_unavailable()

    payload = request.get_json(silent=True)
    return result_response(catalog.create_crops(payload))


# ------------------  REPLACE FIELDS ------------------
@crop_bp.put("/crops/<crop_id>")
def replace_crop(crop_id: str):
    catalog = _catalog()
    if catalog is None:
        return db_unavailable()

    fields = request.get_json(silent=True)
    return result_response(catalog.replace_crop(crop_id, fields))


# ------------------  MERGE FIELDS (edit tab) ------------------
@crop_bp.patch("/crops/<crop_id>")
def update_crop(crop_id: str):
    catalog = _catalog()
    if catalog is None:
        return db_unavailable()

    fields = request.get_json(silent=True)
    return result_response(catalog.update_crop(crop_id, fields))


# ------------------  DELETE (interests go with it) ------------------
@crop_bp.delete("/crops/<crop_id>")
def delete_crop(crop_id: str):
    catalog = _catalog()
    if catalog is None:
        return db_unavailable()

    return result_response(catalog.delete_crop(crop_id))
