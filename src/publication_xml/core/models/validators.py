"""Validation functions for data models."""

from datetime import date, datetime, time
from typing import Any, Dict, List

from pydantic import BaseModel


def to_str(value: Any) -> str:
    """Convert value to string; `None` becomes the empty string.

    Whitespace is kept as-is, display values are copied verbatim into the output.
    """
    if value is None:
        return ""
    return str(value)


def to_list(value: Any) -> List[Any]:
    """Convert value to list if it's not already a list."""
    if value is None:
        return []
    if not isinstance(value, list):
        return [value]
    return value


def to_datetime(value: Any) -> Any:
    """Accept plain calendar dates (``2024-06-15``) as midnight date-times.

    Anything else is left for pydantic's own datetime parsing.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str) and len(value.strip()) == 10:
        try:
            return datetime.combine(date.fromisoformat(value.strip()), time.min)
        except ValueError:
            return value
    return value


def match_field_names(model: type[BaseModel], data: Any) -> Any:
    """Rename the keys of `data` to the field aliases of `model`, ignoring case.

    JSON producers are not consistent about casing (``firstName``, ``FirstName``,
    ``firstname``), so keys are matched on their lower-cased form against both the
    alias and the attribute name of every field. Unknown keys are passed through.
    """
    if not isinstance(data, dict):
        return data

    lookup: Dict[str, str] = {}
    for name, field in model.model_fields.items():
        target = field.alias or name
        lookup[name.lower()] = target
        lookup[target.lower()] = target

    renamed = {}
    for key, value in data.items():
        target = lookup.get(str(key).lower(), key)
        # An exact match wins over a case-insensitive one.
        if target in renamed and key != target:
            continue
        renamed[target] = value
    return renamed
