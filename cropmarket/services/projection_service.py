# cropmarket/services/projection_service.py

from __future__ import annotations

from typing import Any, Dict, List

from pymongo.errors import PyMongoError

from cropmarket.models.crop_models import normalize_email
from cropmarket.services.crop_store import CropStore
from cropmarket.services.result import ErrorKind, ServiceResult
from cropmarket.services.serializers import to_public


class ProjectionService:
    """Read-only owner / buyer views over the crops collection."""

    def __init__(self, store: CropStore):
        if store is None:
            raise ValueError("ProjectionService requires a CropStore")
        self.store = store

    def list_my_crops(self, owner_email: Any) -> ServiceResult:
        email = normalize_email(owner_email)
        if not email:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Email required")
        try:
            crops = self.store.find_by_owner(email)
        except PyMongoError as e:
            return ServiceResult.failure(ErrorKind.INTERNAL, "Failed to fetch crops", str(e))
        return ServiceResult.success(to_public(crops))

    def list_my_interests(self, user_email: Any) -> ServiceResult:
        """
        One row per interest sent by user_email, across all crops.
        Crops without an interests array are skipped.
        """
        email = normalize_email(user_email)
        if not email:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Email is required")
        try:
            crops = self.store.find_with_interest_from(email)
        except PyMongoError as e:
            return ServiceResult.failure(ErrorKind.INTERNAL, "Failed to fetch interests", str(e))

        rows: List[Dict[str, Any]] = []
        for crop in crops:
            owner = crop.get("owner") or {}
            for i in crop.get("interests") or []:
                if normalize_email(i.get("userEmail")) != email:
                    continue
                rows.append({
                    "_id": i.get("_id"),
                    "cropId": i.get("cropId") or str(crop.get("_id")),
                    "cropName": crop.get("name"),
                    "ownerName": owner.get("ownerName"),
                    "quantity": i.get("quantity"),
                    "message": i.get("message"),
                    "status": i.get("status"),
                    "createdAt": i.get("createdAt"),
                })

        return ServiceResult.success(to_public(rows))
