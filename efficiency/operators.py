"""Per-operator throughput calculations and ranking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from .aggregations import mean
from .dto import OperatorEfficiencyReport, OperatorScan, RegionEfficiencyEntry
from .rates import scans_per_hour, span_hours
from .routes import resolve_region


def compute_operator_efficiency(
    name: str,
    scans: Sequence[OperatorScan],
    *,
    route_lookup: dict[str, str],
) -> OperatorEfficiencyReport:
    """Compute overall and per-region throughput for one operator.

    Args:
        name: Operator name.
        scans: Every scan grouped under the operator.
        route_lookup: Tracking id -> route code lookup.

    Returns:
        OperatorEfficiencyReport for the operator.

    Notes:
        The overall span covers every scan, including scans whose tracking id
        has no route. Those scans only drop out of the region breakdown.
    """

    times = [scan.scan_time for scan in scans]
    first_scan_time: datetime | None = min(times) if times else None
    last_scan_time: datetime | None = max(times) if times else None
    working_hours = span_hours(times)

    return OperatorEfficiencyReport(
        name=name,
        scan_count=len(scans),
        working_hours=working_hours,
        total_efficiency=scans_per_hour(len(scans), working_hours),
        first_scan_time=first_scan_time,
        last_scan_time=last_scan_time,
        region_efficiencies=compute_operator_region_efficiencies(scans, route_lookup=route_lookup),
    )


def compute_operator_region_efficiencies(
    scans: Iterable[OperatorScan],
    *,
    route_lookup: dict[str, str],
) -> tuple[RegionEfficiencyEntry, ...]:
    """Bucket one operator's scans by region and compute per-region throughput.

    Args:
        scans: Scans belonging to a single operator.
        route_lookup: Tracking id -> route code lookup.

    Returns:
        Region entries sorted by efficiency (descending), then region key.

    Notes:
        Each region's working hours are a single min/max span over all of the
        operator's scans in that region. Unresolved scans are skipped.
    """

    buckets: dict[str, list[datetime]] = {}
    for scan in scans:
        region_key = resolve_region(scan.tracking_id, route_lookup)
        if region_key is None:
            continue
        buckets.setdefault(region_key, []).append(scan.scan_time)

    entries: list[RegionEfficiencyEntry] = []
    for region_key, times in buckets.items():
        working_hours = span_hours(times)
        entries.append(
            RegionEfficiencyEntry(
                region_key=region_key,
                scan_count=len(times),
                working_hours=working_hours,
                efficiency=scans_per_hour(len(times), working_hours),
            )
        )
    entries.sort(key=lambda entry: (-entry.efficiency, entry.region_key))
    return tuple(entries)


def assemble_operator_list(
    reports: Iterable[OperatorEfficiencyReport],
) -> tuple[tuple[OperatorEfficiencyReport, ...], float]:
    """Rank operators and compute the fleet-wide average throughput.

    Args:
        reports: One report per operator.

    Returns:
        A tuple of (ranked_reports, average_total_efficiency). Reports are
        sorted by total efficiency (descending), then name. The average is the
        unweighted mean of total efficiency, so every operator counts equally
        regardless of scan volume; it is 0.0 when there are no operators.
    """

    ranked = sorted(reports, key=lambda report: (-report.total_efficiency, report.name))
    average = mean(report.total_efficiency for report in ranked)
    return tuple(ranked), average
