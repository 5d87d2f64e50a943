"""Helpers for turning raw request input into store arguments."""

from collections.abc import Mapping
from typing import Any

from gitflow_common.services.validation import validate_identifier
from pydantic import BaseModel


def parse_identifier(raw: str) -> int | None:
    """Parse a path identifier, returning None when it cannot name a record."""
    try:
        value = int(raw)
    except ValueError:
        return None

    if not validate_identifier(value).is_valid:
        return None
    return value


def to_field_names(payload: Mapping[str, Any], model: type[BaseModel]) -> dict[str, Any]:
    """Map camelCase request keys onto the model's field names.

    Keys that match neither an alias nor a field are passed through untouched.
    """
    aliases = {field.alias: name for name, field in model.model_fields.items() if field.alias}
    return {aliases.get(key, key): value for key, value in payload.items()}
