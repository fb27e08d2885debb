"""Partitioning of raw scan events by operator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .dto import OperatorScan
from .records import SCAN_FIELDS, clean_text, record_value
from .timestamps import coerce_scan_time


@dataclass(frozen=True)
class OperatorGroups:
    """Scan events partitioned by operator.

    Attributes:
        groups: Operator name -> parsed scans, in first-appearance order.
        skipped: Number of input events dropped for missing or invalid fields.
    """

    groups: dict[str, list[OperatorScan]] = field(default_factory=dict)
    skipped: int = 0

    @property
    def scan_count(self) -> int:
        """Total number of grouped (valid) scans."""

        return sum(len(scans) for scans in self.groups.values())


def group_scans_by_operator(scans: Iterable[object]) -> OperatorGroups:
    """Group scan events by operator name.

    Args:
        scans: Scan event records (DTOs, mappings, or attribute objects).

    Returns:
        OperatorGroups with each operator's scans and a count of dropped events.

    Notes:
        Events missing an operator, tracking id, or scan time are dropped, as
        are events whose scan time cannot be parsed.
    """

    groups: dict[str, list[OperatorScan]] = {}
    skipped = 0
    for record in scans:
        operator = clean_text(record_value(record, SCAN_FIELDS["operator"]))
        tracking_id = clean_text(record_value(record, SCAN_FIELDS["trackingId"]))
        scan_time = coerce_scan_time(record_value(record, SCAN_FIELDS["scanTime"]))
        if operator is None or tracking_id is None or scan_time is None:
            skipped += 1
            continue
        groups.setdefault(operator, []).append(OperatorScan(tracking_id=tracking_id, scan_time=scan_time))
    return OperatorGroups(groups=groups, skipped=skipped)
