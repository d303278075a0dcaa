# cropmarket/models/interest_models.py

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field, StrictInt, field_validator

from cropmarket.models.crop_models import normalize_email


class InterestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# statuses an owner may move a pending interest into
TERMINAL_STATUSES = (InterestStatus.ACCEPTED.value, InterestStatus.REJECTED.value)


class InterestSubmission(BaseModel):
    """Buyer input for a new interest. Field order is the validation order."""
    userEmail: str = Field(..., min_length=1)
    userName: str = Field(..., min_length=1)
    quantity: StrictInt = Field(..., ge=1)
    message: Optional[str] = None

    @field_validator("userEmail", mode="before")
    @classmethod
    def _norm_email(cls, v: Any) -> Any:
        return normalize_email(v) if isinstance(v, str) else v

    @field_validator("userName", mode="before")
    @classmethod
    def _strip_name(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v


class InterestStatusUpdate(BaseModel):
    status: str
    requesterEmail: str = Field(..., min_length=1)

    @field_validator("status")
    @classmethod
    def _terminal_only(cls, v: str) -> str:
        if v not in TERMINAL_STATUSES:
            raise ValueError("status must be 'accepted' or 'rejected'")
        return v

    @field_validator("requesterEmail", mode="before")
    @classmethod
    def _norm_email(cls, v: Any) -> Any:
        return normalize_email(v) if isinstance(v, str) else v


def build_interest_doc(crop_id: str, submission: InterestSubmission) -> Dict[str, Any]:
    return {
        "_id": ObjectId(),
        "cropId": crop_id,
        "userEmail": submission.userEmail,
        "userName": submission.userName,
        "quantity": submission.quantity,
        "message": submission.message,
        "status": InterestStatus.PENDING.value,
        "createdAt": datetime.now(timezone.utc),
    }
