# cropmarket/models/crop_models.py

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator


# Fields the catalog write paths never touch.
# owner is fixed at creation, interests only change through InterestService.
PROTECTED_FIELDS = ("_id", "owner", "interests")


def normalize_email(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


class OwnerModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    ownerEmail: Optional[str] = None
    ownerName: Optional[str] = None

    @field_validator("ownerEmail")
    @classmethod
    def _norm_email(cls, v: Optional[str]) -> Optional[str]:
        return normalize_email(v) if v is not None else None


def prepare_new_crop(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Builds the document to insert: owner email normalized, interests reset.
    Descriptive attributes are free-form; only owner is validated.
    """
    doc = {k: v for k, v in payload.items() if k not in PROTECTED_FIELDS}
    if payload.get("owner") is not None:
        owner = OwnerModel.model_validate(payload["owner"])
        doc["owner"] = owner.model_dump(exclude_none=True)
    doc["interests"] = []
    return doc


def _is_protected(key: str) -> bool:
    # dotted paths ("owner.ownerEmail") and operators would bypass a plain name check
    root = key.split(".", 1)[0]
    return root in PROTECTED_FIELDS or key.startswith("$")


def strip_protected(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if not _is_protected(k)}
