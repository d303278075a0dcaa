"""JSON conversion of stored documents.

Invariants:
    - Timestamps always render as UTC with millisecond precision,
      whether the driver returned them naive or tz-aware
"""

from datetime import datetime, timedelta, timezone

from bson import ObjectId

from cropmarket.services.serializers import to_public


def test_naive_and_aware_render_the_same():
    aware = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)
    naive = datetime(2024, 5, 1, 12, 30, 15, 123000)

    assert to_public(aware) == "2024-05-01T12:30:15.123+00:00"
    assert to_public(naive) == "2024-05-01T12:30:15.123+00:00"


def test_offset_is_converted_to_utc():
    local = datetime(2024, 5, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))

    assert to_public(local) == "2024-05-01T12:30:00.000+00:00"


def test_nested_values():
    oid = ObjectId()
    doc = {"_id": oid, "interests": [{"_id": oid, "createdAt": datetime(2024, 1, 1)}], "n": 3}

    assert to_public(doc) == {
        "_id": str(oid),
        "interests": [{"_id": str(oid), "createdAt": "2024-01-01T00:00:00.000+00:00"}],
        "n": 3,
    }
