"""Global region summary across every operator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .aggregations import safe_ratio
from .dto import OperatorScan, RegionSummaryEntry
from .rates import scans_per_hour, summed_tracking_span_hours
from .routes import resolve_region


def summarize_regions(
    operator_scans: Mapping[str, Sequence[OperatorScan]],
    *,
    route_lookup: dict[str, str],
) -> tuple[RegionSummaryEntry, ...]:
    """Aggregate every resolved scan by region, independent of operator.

    Args:
        operator_scans: Operator name -> scans.
        route_lookup: Tracking id -> route code lookup.

    Returns:
        One entry per observed region key, sorted by efficiency (descending),
        then region key.

    Notes:
        A region's working hours are the sum of each tracking id's own scan
        span, not one min/max over the region. Scans without a route are
        excluded.
    """

    region_scans: dict[str, list[OperatorScan]] = {}
    region_operators: dict[str, set[str]] = {}
    for operator, scans in operator_scans.items():
        for scan in scans:
            region_key = resolve_region(scan.tracking_id, route_lookup)
            if region_key is None:
                continue
            region_scans.setdefault(region_key, []).append(scan)
            region_operators.setdefault(region_key, set()).add(operator)

    entries: list[RegionSummaryEntry] = []
    for region_key, scans in region_scans.items():
        total_scans = len(scans)
        operator_count = len(region_operators[region_key])
        total_working_hours = summed_tracking_span_hours(scans)
        entries.append(
            RegionSummaryEntry(
                region_key=region_key,
                total_scans=total_scans,
                operator_count=operator_count,
                efficiency=scans_per_hour(total_scans, total_working_hours),
                average_per_operator=safe_ratio(total_scans, operator_count),
                total_working_hours=total_working_hours,
            )
        )
    entries.sort(key=lambda entry: (-entry.efficiency, entry.region_key))
    return tuple(entries)
