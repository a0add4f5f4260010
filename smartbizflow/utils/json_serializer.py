"""
JSON serializer utility for converting Python objects to JSON-safe values
"""
import json
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from uuid import UUID
from typing import Any, Optional

from pydantic import BaseModel

from smartbizflow.utils.datetime_utils import iso_8601_utc


def sanitize_for_json(obj: Any) -> Any:
    """
    Recursively sanitize Python objects for JSON storage (datetime/date -> isoformat, Enum -> value, etc.).
    Use before placing values into the record store document.
    """
    return to_json_safe(obj)


def to_json_safe(value: Any) -> Any:
    """
    Recursively convert Python objects to JSON-safe values

    Args:
        value: Any Python object to convert

    Returns:
        JSON-safe equivalent of the input value
    """
    if value is None:
        return None
    # Enum before str: str-based enums are also str instances
    elif isinstance(value, Enum):
        return to_json_safe(value.value)
    elif isinstance(value, (str, int, float, bool)):
        return value
    elif isinstance(value, datetime):
        return iso_8601_utc(value)
    elif isinstance(value, (date, time)):
        return value.isoformat()
    elif isinstance(value, Decimal):
        return float(value)
    elif isinstance(value, (UUID, PurePath)):
        return str(value)
    elif isinstance(value, dict):
        return {str(k): to_json_safe(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple, set)):
        return [to_json_safe(item) for item in value]
    elif isinstance(value, BaseModel):
        return to_json_safe(value.model_dump())
    else:
        # Fallback for any other type
        return str(value)


def dumps_opaque(value: Any) -> Optional[str]:
    """
    Serialize a value into the opaque string form audit logs keep for old/new values.
    Strings pass through untouched.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(to_json_safe(value), sort_keys=True)
