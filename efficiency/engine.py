"""Orchestration entry point for the efficiency engine.

The engine is a pure, non-Django module that accepts in-memory scan and route
records and returns DTOs. Every lookup and accumulator is local to a single
call, so concurrent invocations on independent inputs never share state.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from .dto import AnalysisResult
from .errors import ValidationError
from .grouping import group_scans_by_operator
from .operators import assemble_operator_list, compute_operator_efficiency
from .records import ROUTE_FIELDS, SCAN_FIELDS, has_field
from .regions import summarize_regions
from .routes import build_route_lookup


def analyze_sorting_efficiency(
    scans: Iterable[object],
    routes: Iterable[object],
    *,
    processed_at: datetime | None = None,
) -> AnalysisResult:
    """Analyze sorting throughput per operator and per region.

    Args:
        scans: Scan events with tracking id, operator, and scan time.
        routes: Route assignments with tracking id and route code.
        processed_at: Optional timestamp to stamp on the result; defaults to
            the current UTC time.

    Returns:
        AnalysisResult with ranked operators and the global region summary.

    Raises:
        ValidationError: When either input is empty, or its first record lacks
            a required field. Raised before any computation.
    """

    scan_records = list(scans)
    if not scan_records:
        raise ValidationError("scan data empty")
    route_records = list(routes)
    if not route_records:
        raise ValidationError("route data empty")
    _require_fields(scan_records[0], SCAN_FIELDS, label="scan data")
    _require_fields(route_records[0], ROUTE_FIELDS, label="route data")

    route_lookup = build_route_lookup(route_records)
    grouped = group_scans_by_operator(scan_records)

    reports = [
        compute_operator_efficiency(name, operator_scans, route_lookup=route_lookup)
        for name, operator_scans in grouped.groups.items()
    ]
    operators, average_total_efficiency = assemble_operator_list(reports)
    region_summary = summarize_regions(grouped.groups, route_lookup=route_lookup)

    total_scans = len(scan_records)
    matched_scans = sum(entry.total_scans for entry in region_summary)

    return AnalysisResult(
        operators=operators,
        total_scans=total_scans,
        average_total_efficiency=average_total_efficiency,
        region_summary=region_summary,
        processed_at=processed_at or datetime.now(timezone.utc),
        skipped_scans=grouped.skipped,
        unmatched_scans=grouped.scan_count - matched_scans,
    )


def _require_fields(record: object, fields: dict[str, tuple[str, ...]], *, label: str) -> None:
    """Raise ValidationError when a record lacks any required field."""

    for canonical, names in fields.items():
        if not has_field(record, names):
            raise ValidationError(f"{label} missing field: {canonical}")
