# cropmarket/services/interest_service.py

from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from cropmarket.models.crop_models import normalize_email
from cropmarket.models.interest_models import (
    InterestStatusUpdate,
    InterestSubmission,
    build_interest_doc,
)
from cropmarket.services.crop_store import CropStore, parse_object_id
from cropmarket.services.result import ErrorKind, ServiceResult
from cropmarket.services.serializers import to_public


# first failing field decides the message
_SUBMISSION_MESSAGES = {
    "userEmail": "User info required",
    "userName": "User info required",
    "quantity": "Quantity must be at least 1",
    "message": "Message must be text",
}

_STATUS_MESSAGES = {
    "status": "Status must be 'accepted' or 'rejected'",
    "requesterEmail": "Requester email required",
}


def _first_error(exc: ValidationError, messages: dict) -> str:
    errors = exc.errors()
    field = errors[0]["loc"][0] if errors and errors[0].get("loc") else None
    return messages.get(field, "Invalid input")


def _find_interest(crop: dict, interest_oid) -> Optional[dict]:
    for i in crop.get("interests") or []:
        if i.get("_id") == interest_oid:
            return i
    return None


class InterestService:
    """
    Interest lifecycle: submission and owner-driven status transitions.
    All writes are conditional single-document updates through CropStore.
    """

    def __init__(self, store: CropStore):
        if store is None:
            raise ValueError("InterestService requires a CropStore")
        self.store = store

    # ------------------------------------------------------------
    # SUBMIT
    # ------------------------------------------------------------
    def submit_interest(
        self,
        crop_id: Any,
        user_email: Any,
        user_name: Any,
        quantity: Any,
        message: Any = None,
    ) -> ServiceResult:
        try:
            submission = InterestSubmission(
                userEmail=user_email,
                userName=user_name,
                quantity=quantity,
                message=message,
            )
        except ValidationError as e:
            return ServiceResult.failure(ErrorKind.VALIDATION, _first_error(e, _SUBMISSION_MESSAGES))

        crop_oid = parse_object_id(crop_id)
        if crop_oid is None:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Invalid crop ID")

        try:
            crop = self.store.find_crop(crop_oid)
            if not crop:
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "Crop not found")

            owner_email = normalize_email((crop.get("owner") or {}).get("ownerEmail"))
            if owner_email and owner_email == submission.userEmail:
                return ServiceResult.failure(ErrorKind.FORBIDDEN, "Owner cannot send interest")

            interest = build_interest_doc(str(crop_oid), submission)
            if self.store.push_interest_if_absent(crop_oid, interest):
                return ServiceResult.success(to_public(interest))

            # condition failed: crop deleted meanwhile, or a same-email interest won
            if not self.store.find_crop(crop_oid):
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "Crop not found")
            return ServiceResult.failure(ErrorKind.CONFLICT, "You've already sent an interest")
        except PyMongoError as e:
            return ServiceResult.failure(ErrorKind.INTERNAL, "Failed to submit interest", str(e))

    # ------------------------------------------------------------
    # STATUS TRANSITION (owner only, pending -> accepted/rejected)
    # ------------------------------------------------------------
    def update_interest_status(
        self,
        crop_id: Any,
        interest_id: Any,
        status: Any,
        requester_email: Any,
    ) -> ServiceResult:
        try:
            update = InterestStatusUpdate(status=status, requesterEmail=requester_email)
        except ValidationError as e:
            return ServiceResult.failure(ErrorKind.VALIDATION, _first_error(e, _STATUS_MESSAGES))

        crop_oid = parse_object_id(crop_id)
        interest_oid = parse_object_id(interest_id)
        if crop_oid is None or interest_oid is None:
            return ServiceResult.failure(ErrorKind.VALIDATION, "Invalid ID(s)")

        try:
            crop = self.store.find_crop(crop_oid)
            if not crop:
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "Crop not found")

            stored_owner = (crop.get("owner") or {}).get("ownerEmail")
            if not stored_owner or normalize_email(stored_owner) != update.requesterEmail:
                return ServiceResult.failure(ErrorKind.FORBIDDEN, "Only the crop owner can update interests")

            if _find_interest(crop, interest_oid) is None:
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "Interest not found")

            if self.store.set_interest_status_if_pending(
                crop_oid, interest_oid, stored_owner, update.status
            ):
                return ServiceResult.success({"success": True})

            # nothing matched: classify against the current document
            crop = self.store.find_crop(crop_oid)
            if not crop:
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "Crop not found")
            if _find_interest(crop, interest_oid) is None:
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "Interest not found")
            return ServiceResult.failure(ErrorKind.CONFLICT, "Interest status already decided")
        except PyMongoError as e:
            return ServiceResult.failure(ErrorKind.INTERNAL, "Failed to update interest status", str(e))
