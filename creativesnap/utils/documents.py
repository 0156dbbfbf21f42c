"""Helpers for moving documents between the store and JSON"""

from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId

from creativesnap.core.errors import InvalidArgument


def object_id(value: str) -> ObjectId:
    """Parse a record id from a path or payload"""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidArgument(f"Invalid id: {value}")


def to_json(value: Any) -> Any:
    """Make a document (or list of them) JSON-safe: ObjectIds become hex strings"""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_json(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_json(item) for item in value]
    return value


def maybe_json(document: Optional[dict]) -> Optional[dict]:
    """Single-record lookups answer null rather than 404 when nothing matches"""
    if document is None:
        return None
    return to_json(document)
