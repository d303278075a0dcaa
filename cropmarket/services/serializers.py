# cropmarket/services/serializers.py

from datetime import datetime, timezone
from typing import Any

from bson import ObjectId


def _utc_iso(value: datetime) -> str:
    # Mongo hands back naive UTC datetimes truncated to milliseconds
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds")


def to_public(value: Any) -> Any:
    """
    Recursively converts Mongo values into JSON-safe ones:
    ObjectId -> str, datetime -> UTC ISO string. Dicts and lists are copied.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return _utc_iso(value)
    if isinstance(value, dict):
        return {k: to_public(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_public(v) for v in value]
    return value
