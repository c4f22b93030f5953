"""
Request Parameters
------------------
Declaring, validating and encoding request descriptors.

A descriptor is a dataclass whose fields carry their external parameter
name and an optional required flag:

    @dataclass
    class CreateVenueRequest:
        name: str = param("venue.name", required=True)
        capacity: Optional[int] = param("venue.capacity", default=None)

A plain mapping of strings is also accepted and passes through unchanged.
"""

from dataclasses import MISSING, field, fields, is_dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from eventbrite_v3.core.errors import ValidationError

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DATE_FORMAT = "%Y-%m-%d"

_PARAM_KEY = "param"
_REQUIRED_KEY = "required"


def param(
    name: Optional[str] = None,
    *,
    required: bool = False,
    default: Any = "",
    default_factory: Any = MISSING,
) -> Any:
    """Declare a descriptor field with its external name."""
    metadata = {_PARAM_KEY: name, _REQUIRED_KEY: required}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def param_name(f) -> str:
    """External parameter name of a dataclass field, falling back to its attribute name."""
    return f.metadata.get(_PARAM_KEY) or f.name


def is_required(f) -> bool:
    return bool(f.metadata.get(_REQUIRED_KEY, False))


def _is_descriptor(obj: Any) -> bool:
    return is_dataclass(obj) and not isinstance(obj, type)


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def validate(descriptor: Any) -> None:
    """
    Raise ValidationError for the first required field left at a zero value.

    Mappings and None have no declared requirements and always pass.
    """
    if not _is_descriptor(descriptor):
        return

    for f in fields(descriptor):
        if is_required(f) and _is_zero(getattr(descriptor, f.name)):
            raise ValidationError(param_name(f), type(descriptor).__name__)


def render(value: Any) -> str:
    """
    Render one field for a query string.

    Integers in base 10, floats fixed-point with 4 decimals, strings and
    bytes as-is (undecodable bytes become U+FFFD). Everything else (bools, datetimes, nested objects, lists,
    None) has no query form and renders empty.
    """
    if isinstance(value, bool):
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.4f}"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value
    return ""


def to_query(descriptor: Any) -> Dict[str, str]:
    """
    Flatten a descriptor into query parameters.

    Fields rendering to an empty string are left out. Only single-level
    fields are supported; nested objects and lists are not expanded.
    """
    if descriptor is None:
        return {}
    if isinstance(descriptor, Mapping):
        return dict(descriptor)
    if not _is_descriptor(descriptor):
        raise TypeError(f"Unsupported request descriptor: {type(descriptor).__name__}")

    values: Dict[str, str] = {}
    for f in fields(descriptor):
        rendered = render(getattr(descriptor, f.name))
        if rendered != "":
            values[param_name(f)] = rendered
    return values


def _encode(value: Any) -> Any:
    if _is_descriptor(value):
        return to_body(value)
    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, Mapping):
        return {k: _encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value


def to_body(descriptor: Any) -> Any:
    """
    Encode a descriptor as a JSON-ready object keyed by parameter name.

    Every field is included, zero values too. None encodes as JSON null.
    """
    if descriptor is None:
        return None
    if isinstance(descriptor, Mapping):
        return _encode(descriptor)
    if not _is_descriptor(descriptor):
        raise TypeError(f"Unsupported request descriptor: {type(descriptor).__name__}")

    return {param_name(f): _encode(getattr(descriptor, f.name)) for f in fields(descriptor)}
