# cropmarket/services/catalog_service.py

from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from cropmarket.models.crop_models import prepare_new_crop, strip_protected
from cropmarket.services.crop_store import CropStore, parse_object_id
from cropmarket.services.result import ErrorKind, ServiceResult
from cropmarket.services.serializers import to_public


def _parse_limit(limit: Any) -> Optional[int]:
    if limit is None or limit == "":
        return 0
    try:
        value = int(limit)
    except (TypeError, ValueError):
        return None
    return value if value >= 0 else None


def _failed_owner_field(exc: ValidationError) -> str:
    errors = exc.errors()
    loc = errors[0].get("loc") if errors else ()
    return ".".join(["owner", *(str(p) for p in loc or ())])


class CropCatalogService:
    """Plain listing CRUD. No business rules beyond id validity and protected fields."""

    def __init__(self, store: CropStore):
        if store is None:
            raise ValueError("CropCatalogService requires a CropStore")
        self.store = store

    def list_crops(self, crop_type: Optional[str] = None, limit: Any = None) -> ServiceResult:
        n = _parse_limit(limit)
        if n is None:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Limit must be a non-negative integer")
        try:
            crops = self.store.find_crops(crop_type=crop_type or None, limit=n)
        except PyMongoError as e:
            return ServiceResult.failure(ErrorKind.INTERNAL, "Failed to fetch crops", str(e))
        return ServiceResult.success(to_public(crops))

    def get_crop(self, crop_id: Any) -> ServiceResult:
        oid = parse_object_id(crop_id)
        if oid is None:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Invalid crop ID")
        try:
            crop = self.store.find_crop(oid)
        except PyMongoError as e:
            return ServiceResult.failure(ErrorKind.INTERNAL, "Failed to fetch crop", str(e))
        if not crop:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, "Crop not found")
        return ServiceResult.success(to_public(crop))

    def create_crops(self, payload: Any) -> ServiceResult:
        """Single object -> insert one, list of objects -> insert many."""
        many = isinstance(payload, list)
        items = payload if many else [payload]
        if not items or not all(isinstance(x, dict) for x in items):
            return ServiceResult.failure(ErrorKind.VALIDATION, "Crop data must be an object or a list of objects")

        try:
            docs = [prepare_new_crop(x) for x in items]
        except ValidationError as e:
            return ServiceResult.failure(ErrorKind.VALIDATION, f"Invalid crop field: {_failed_owner_field(e)}")

        try:
            if many:
                res = self.store.insert_many(docs)
                return ServiceResult.success({
                    "acknowledged": res.acknowledged,
                    "insertedIds": [str(i) for i in res.inserted_ids],
                })
            res = self.store.insert_one(docs[0])
            return ServiceResult.success({
                "acknowledged": res.acknowledged,
                "insertedId": str(res.inserted_id),
            })
        except PyMongoError as e:
            return ServiceResult.failure(ErrorKind.INTERNAL, "Failed to add crop", str(e))

    def _set_fields(self, crop_id: Any, fields: Any, action: str):
        oid = parse_object_id(crop_id)
        if oid is None:
            return None, ServiceResult.failure(ErrorKind.VALIDATION, "Invalid crop ID")
        if not isinstance(fields, dict):
            return None, ServiceResult.failure(ErrorKind.VALIDATION, "Crop fields must be an object")

        fields = strip_protected(fields)
        try:
            if not fields:
                # nothing writable; still report whether the crop exists
                crop = self.store.find_crop(oid)
                if not crop:
                    return None, ServiceResult.failure(ErrorKind.NOT_FOUND, "Crop not found")
                return {"matched": 1, "modified": 0}, None
            res = self.store.set_fields(oid, fields)
        except PyMongoError as e:
            return None, ServiceResult.failure(ErrorKind.INTERNAL, f"Failed to {action} crop", str(e))
        if res.matched_count == 0:
            return None, ServiceResult.failure(ErrorKind.NOT_FOUND, "Crop not found")
        return {"matched": res.matched_count, "modified": res.modified_count}, None

    def replace_crop(self, crop_id: Any, fields: Any) -> ServiceResult:
        _, err = self._set_fields(crop_id, fields, "replace")
        if err:
            return err
        return ServiceResult.success({"success": True})

    def update_crop(self, crop_id: Any, fields: Any) -> ServiceResult:
        counts, err = self._set_fields(crop_id, fields, "update")
        if err:
            return err
        return ServiceResult.success({
            "acknowledged": True,
            "matchedCount": counts["matched"],
            "modifiedCount": counts["modified"],
        })

    def delete_crop(self, crop_id: Any) -> ServiceResult:
        """Interests are embedded, so they go with the crop."""
        oid = parse_object_id(crop_id)
        if oid is None:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Invalid crop ID")
        try:
            res = self.store.delete(oid)
        except PyMongoError as e:
            return ServiceResult.failure(ErrorKind.INTERNAL, "Failed to delete crop", str(e))
        if res.deleted_count == 0:
            return ServiceResult.failure(ErrorKind.NOT_FOUND, "Crop not found")
        return ServiceResult.success({"success": True})
