"""Route lookup construction and region resolution."""

from __future__ import annotations

from collections.abc import Iterable

from .records import ROUTE_FIELDS, clean_text, record_value


def build_route_lookup(routes: Iterable[object]) -> dict[str, str]:
    """Build a tracking id -> route code lookup from route assignments.

    Args:
        routes: Route assignment records (DTOs, mappings, or attribute objects).

    Returns:
        Mapping of tracking id to route code.

    Notes:
        Records with a blank tracking id or route code are skipped. When a
        tracking id is assigned more than once, the record processed last wins;
        duplicates are not treated as errors.
    """

    lookup: dict[str, str] = {}
    for record in routes:
        tracking_id = clean_text(record_value(record, ROUTE_FIELDS["trackingId"]))
        route_code = clean_text(record_value(record, ROUTE_FIELDS["routeCode"]))
        if tracking_id is None or route_code is None:
            continue
        lookup[tracking_id] = route_code
    return lookup


def region_key_for(route_code: str | None) -> str | None:
    """Derive the region key for a route code.

    Args:
        route_code: Route code such as "P100".

    Returns:
        The uppercased first character ("P"), or None for a blank code.
    """

    if route_code is None:
        return None
    cleaned = route_code.strip()
    if not cleaned:
        return None
    return cleaned[0].upper()


def resolve_region(tracking_id: str, lookup: dict[str, str]) -> str | None:
    """Return the region key for a tracking id, or None when it has no route."""

    return region_key_for(lookup.get(tracking_id))
