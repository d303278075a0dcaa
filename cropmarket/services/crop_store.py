# cropmarket/services/crop_store.py

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.collection import Collection

from cropmarket.models.interest_models import InterestStatus


def _email_pattern(email: str) -> Dict[str, str]:
    # exact match ignoring case; documents written before normalization may be mixed-case
    return {"$regex": f"^{re.escape(email)}$", "$options": "i"}


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Returns an ObjectId for a well-formed id string, else None."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


class CropStore:
    """
    Thin adapter over the crops collection.
    Each method is a single-document (or single-query) store operation;
    the interest writes carry their own precondition in the filter so the
    check and the write happen atomically in MongoDB.
    """

    def __init__(self, collection: Collection):
        if collection is None:
            raise ValueError("CropStore requires a collection")
        self.col = collection

    # ------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------
    def find_crops(self, crop_type: Optional[str] = None, limit: int = 0) -> List[Dict[str, Any]]:
        query: Dict[str, Any] = {}
        if crop_type:
            query["type"] = crop_type
        cursor = self.col.find(query)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def find_crop(self, crop_oid: ObjectId) -> Optional[Dict[str, Any]]:
        return self.col.find_one({"_id": crop_oid})

    def find_by_owner(self, owner_email: str) -> List[Dict[str, Any]]:
        return list(self.col.find({"owner.ownerEmail": _email_pattern(owner_email)}))

    def find_with_interest_from(self, user_email: str) -> List[Dict[str, Any]]:
        return list(self.col.find({"interests.userEmail": _email_pattern(user_email)}))

    # ------------------------------------------------------------
    # Catalog writes
    # ------------------------------------------------------------
    def insert_one(self, doc: Dict[str, Any]):
        return self.col.insert_one(doc)

    def insert_many(self, docs: List[Dict[str, Any]]):
        return self.col.insert_many(docs)

    def set_fields(self, crop_oid: ObjectId, fields: Dict[str, Any]):
        return self.col.update_one({"_id": crop_oid}, {"$set": fields})

    def delete(self, crop_oid: ObjectId):
        return self.col.delete_one({"_id": crop_oid})

    # ------------------------------------------------------------
    # Conditional interest writes
    # ------------------------------------------------------------
    def push_interest_if_absent(self, crop_oid: ObjectId, interest: Dict[str, Any]) -> bool:
        """
        Appends the interest only if the crop exists, the buyer is not the
        owner and no interest from the same email is present.
        Returns False when the condition did not hold.
        """
        email = interest["userEmail"]
        res = self.col.update_one(
            {
                "_id": crop_oid,
                "owner.ownerEmail": {"$ne": email},
                "interests.userEmail": {"$ne": email},
            },
            {"$push": {"interests": interest}},
        )
        return res.modified_count == 1

    def set_interest_status_if_pending(
        self,
        crop_oid: ObjectId,
        interest_oid: ObjectId,
        owner_email: str,
        status: str,
    ) -> bool:
        """
        Sets exactly the matched interest's status, only while it is pending
        and only for the crop's owner. Returns False when nothing matched.
        """
        res = self.col.update_one(
            {
                "_id": crop_oid,
                "owner.ownerEmail": owner_email,
                "interests": {
                    "$elemMatch": {
                        "_id": interest_oid,
                        "status": InterestStatus.PENDING.value,
                    }
                },
            },
            {"$set": {"interests.$.status": status}},
        )
        return res.modified_count == 1
