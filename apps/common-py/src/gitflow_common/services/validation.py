"""Input validation helpers.

Failures are reported through :class:`ValidationResult` rather than raised,
so callers can report every problem with a payload at once.
"""

import math
from collections.abc import Mapping
from typing import Any

from gitflow_common.models.validation import ValidationResult

MAX_NAME_LENGTH = 100


def validate_email_format(email: str) -> bool:
    """Check that ``email`` looks like ``local@domain.tld``.

    Requires exactly one "@", no whitespace, a local part not starting with a
    dot, and a dot in the domain with a non-empty label on each side of it.
    """
    if not isinstance(email, str) or email.count("@") != 1:
        return False
    if any(char.isspace() for char in email):
        return False

    local, _, domain = email.partition("@")
    if not local or local.startswith("."):
        return False

    labels = domain.split(".")
    return any(left and right for left, right in zip(labels, labels[1:]))


def _check_name(name: Any) -> list[str]:
    if name is not None and not isinstance(name, str):
        return ["Name must be a string"]

    errors = []
    if not name or not name.strip():
        errors.append("Name is required and cannot be empty")
    if name and len(name) > MAX_NAME_LENGTH:
        errors.append(f"Name must be less than {MAX_NAME_LENGTH} characters")
    return errors


def _check_email(email: Any) -> list[str]:
    if email is not None and not isinstance(email, str):
        return ["Email must be a string"]

    errors = []
    if not email or not email.strip():
        errors.append("Email is required and cannot be empty")
    if email and not validate_email_format(email):
        errors.append("Email format is invalid")
    return errors


def validate_user_fields(fields: Mapping[str, Any]) -> ValidationResult:
    """Validate a full or partial set of user fields.

    Only the keys present in ``fields`` are checked, which lets the same rules
    cover both create and partial-update payloads.

    Args:
        fields: Mapping that may contain ``name``, ``email`` and ``is_active``

    Returns:
        ValidationResult listing every violated rule in field order
    """
    errors: list[str] = []

    if "name" in fields:
        errors.extend(_check_name(fields["name"]))

    if "email" in fields:
        errors.extend(_check_email(fields["email"]))

    if "is_active" in fields and not isinstance(fields["is_active"], bool):
        errors.append("isActive must be a boolean value")

    return ValidationResult.from_errors(errors)


def validate_identifier(value: Any) -> ValidationResult:
    """Check that ``value`` is a strictly positive integer.

    The integer and positivity checks are independent; a value failing both
    gets both errors.
    """
    errors: list[str] = []
    is_number = isinstance(value, int | float) and not isinstance(value, bool)

    if not is_number or not (isinstance(value, int) or value.is_integer()):
        errors.append("ID must be an integer")

    if not is_number or (isinstance(value, float) and math.isnan(value)) or value <= 0:
        errors.append("ID must be a positive number")

    return ValidationResult.from_errors(errors)
