"""Serialization helpers for dumping simulation state."""

from collections.abc import Hashable
from dataclasses import asdict, fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": serialize_value(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_key(key: Hashable) -> str:
    """Render a storage key as a string.

    Composite keys such as ``(loan_id, payment_number)`` become ``"1-2"``.
    """
    if isinstance(key, tuple):
        return "-".join(serialize_key(part) for part in key)
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, bool) or value is None:
        return value
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return {k: serialize_value(v) for k, v in asdict(value).items()}
    elif isinstance(value, dict):
        return {serialize_key(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
