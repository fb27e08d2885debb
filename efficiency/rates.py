"""Time-span and throughput calculations.

Two span rules exist and must stay separate:

- `span_hours`: one min/max over a whole bucket (operator, operator x region).
- `summed_tracking_span_hours`: the sum of each tracking id's own min/max,
  used only by the global region summary.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .dto import OperatorScan
from .timestamps import hours_between


def span_hours(times: Iterable[datetime]) -> float:
    """Return the hours between the earliest and latest timestamp.

    Args:
        times: Scan timestamps for a single bucket.

    Returns:
        Elapsed hours, or 0.0 for fewer than two distinct timestamps.
    """

    first: datetime | None = None
    last: datetime | None = None
    for value in times:
        if first is None or value < first:
            first = value
        if last is None or value > last:
            last = value
    if first is None or last is None:
        return 0.0
    return hours_between(first, last)


def summed_tracking_span_hours(scans: Iterable[OperatorScan]) -> float:
    """Sum each tracking id's own scan span across a collection of scans.

    Args:
        scans: Scans from any number of operators and tracking ids.

    Returns:
        Total of the per-tracking-id spans in hours.
    """

    by_tracking_id: dict[str, list[datetime]] = {}
    for scan in scans:
        by_tracking_id.setdefault(scan.tracking_id, []).append(scan.scan_time)
    return sum(span_hours(times) for times in by_tracking_id.values())


def scans_per_hour(scan_count: int, working_hours: float) -> float:
    """Compute throughput for a bucket.

    Args:
        scan_count: Number of scans in the bucket.
        working_hours: Bucket span in hours.

    Returns:
        Scans per hour, or 0.0 when `working_hours` is not positive.
    """

    if working_hours <= 0:
        return 0.0
    return scan_count / working_hours
