"""
Required-field validation for request dataclasses.

Each request class lists its mandatory fields in REQUIRED_FIELDS as dotted
attribute paths. Validation runs before any request is built.
"""

from typing import Any

from edgegrid_client.core.client import StructValidationError

_MISSING = object()


def _resolve(obj: Any, path: str) -> Any:
    value = obj
    for part in path.split("."):
        if value is None:
            return _MISSING
        value = getattr(value, part, _MISSING)
        if value is _MISSING:
            return _MISSING
    return value


def is_blank(value: Any) -> bool:
    """Check if a value is unset: None, empty string/collection or zero."""
    if value is _MISSING or value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def missing_fields(request: Any) -> list[str]:
    """
    List the required paths of a request that are blank.

    A path below an already missing parent is not reported again.
    """
    missing: list[str] = []
    for path in getattr(type(request), "REQUIRED_FIELDS", ()):
        if any(path.startswith(f"{parent}.") for parent in missing):
            continue
        if is_blank(_resolve(request, path)):
            missing.append(path)
    return missing


def validate_required(request: Any) -> None:
    """
    Validate that every required field of a request is set.

    Raises:
        StructValidationError: Naming every missing field

    """
    missing = missing_fields(request)
    if missing:
        raise StructValidationError(missing)
