"""Duck-typed field access for scan and route records.

Upstream normalization hands the engine either DTO instances, ORM rows, or plain
dictionaries keyed by snake_case or camelCase names. These helpers read a field
from any of them without caring which.
"""

from __future__ import annotations

from collections.abc import Mapping

SCAN_FIELDS: dict[str, tuple[str, ...]] = {
    "trackingId": ("tracking_id", "trackingId"),
    "operator": ("operator",),
    "scanTime": ("scan_time", "scanTime"),
}

ROUTE_FIELDS: dict[str, tuple[str, ...]] = {
    "trackingId": ("tracking_id", "trackingId"),
    "routeCode": ("route_code", "routeCode"),
}

_MISSING = object()


def record_value(record: object, names: tuple[str, ...]) -> object | None:
    """Return the first present value for any of `names` on a record.

    Args:
        record: A mapping or an object exposing attributes.
        names: Candidate key/attribute names, checked in order.

    Returns:
        The value, or None when no candidate name is present.
    """

    for name in names:
        value = _lookup(record, name)
        if value is not _MISSING:
            return value
    return None


def has_field(record: object, names: tuple[str, ...]) -> bool:
    """Return True if the record declares any of `names`, even with a blank value."""

    return any(_lookup(record, name) is not _MISSING for name in names)


def clean_text(value: object) -> str | None:
    """Return a trimmed string form of a scalar value, or None when blank."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    cleaned = str(value).strip()
    return cleaned or None


def _lookup(record: object, name: str) -> object:
    if isinstance(record, Mapping):
        return record.get(name, _MISSING)
    return getattr(record, name, _MISSING)
