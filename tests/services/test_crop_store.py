"""CropStore conditional writes.

Invariants:
    - push_interest_if_absent applies only when no same-email interest exists
      and the email is not the owner's
    - set_interest_status_if_pending applies only to a pending interest, for
      the stored owner, and touches only that element
"""

from bson import ObjectId
import pytest

from cropmarket.services.crop_store import CropStore, parse_object_id


def _crop(collection, interests=None):
    doc = {"_id": ObjectId(), "name": "Wheat", "owner": {"ownerEmail": "a@x.com"}}
    if interests is not None:
        doc["interests"] = interests
    collection.insert_one(doc)
    return doc["_id"]


def _interest(email, status="pending"):
    return {"_id": ObjectId(), "userEmail": email, "status": status}


def test_parse_object_id():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid
    assert parse_object_id(oid) is oid
    assert parse_object_id("nope") is None
    assert parse_object_id(None) is None
    assert parse_object_id(12) is None


def test_store_requires_collection():
    with pytest.raises(ValueError):
        CropStore(None)


def test_push_creates_array_when_missing(store, collection):
    crop_oid = _crop(collection)

    assert store.push_interest_if_absent(crop_oid, _interest("b@x.com"))
    assert len(collection.find_one({"_id": crop_oid})["interests"]) == 1


def test_push_refuses_duplicate_email(store, collection):
    crop_oid = _crop(collection, [_interest("b@x.com")])

    assert not store.push_interest_if_absent(crop_oid, _interest("b@x.com"))
    assert store.push_interest_if_absent(crop_oid, _interest("c@x.com"))
    assert len(collection.find_one({"_id": crop_oid})["interests"]) == 2


def test_push_refuses_owner_and_missing_crop(store, collection):
    crop_oid = _crop(collection, [])

    assert not store.push_interest_if_absent(crop_oid, _interest("a@x.com"))
    assert not store.push_interest_if_absent(ObjectId(), _interest("b@x.com"))


def test_status_set_only_while_pending(store, collection):
    first, second = _interest("b@x.com"), _interest("c@x.com", status="accepted")
    crop_oid = _crop(collection, [first, second])

    assert store.set_interest_status_if_pending(crop_oid, first["_id"], "a@x.com", "rejected")
    assert not store.set_interest_status_if_pending(crop_oid, first["_id"], "a@x.com", "accepted")
    assert not store.set_interest_status_if_pending(crop_oid, second["_id"], "a@x.com", "rejected")

    stored = collection.find_one({"_id": crop_oid})["interests"]
    assert [i["status"] for i in stored] == ["rejected", "accepted"]


def test_status_requires_owner(store, collection):
    pending = _interest("b@x.com")
    crop_oid = _crop(collection, [pending])

    assert not store.set_interest_status_if_pending(crop_oid, pending["_id"], "b@x.com", "accepted")
    assert collection.find_one({"_id": crop_oid})["interests"][0]["status"] == "pending"


def test_find_with_interest_from(store, collection):
    _crop(collection, [_interest("b@x.com")])
    _crop(collection, [_interest("c@x.com")])
    _crop(collection)

    assert len(store.find_with_interest_from("b@x.com")) == 1
