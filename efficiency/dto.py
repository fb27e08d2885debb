"""DTO types consumed and returned by the efficiency engine.

DTOs are plain data containers used to hand analysis results to persistence
and export collaborators. They intentionally avoid any Django/ORM dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ScanEventInput:
    """One timestamped record of a worker processing a package.

    Attributes:
        tracking_id: Package identifier linking the scan to a route assignment.
        operator: Worker name as exported by the scanner.
        scan_time: A datetime, an ISO-8601 string, or epoch milliseconds.
    """

    tracking_id: str
    operator: str
    scan_time: datetime | str | int | float


@dataclass(frozen=True)
class RouteAssignmentInput:
    """Destination route assigned to a package.

    Attributes:
        tracking_id: Package identifier.
        route_code: Routing code whose first character denotes the region.
    """

    tracking_id: str
    route_code: str


@dataclass(frozen=True, slots=True)
class OperatorScan:
    """A validated scan event grouped under its operator.

    Attributes:
        tracking_id: Package identifier.
        scan_time: Parsed, timezone-aware scan timestamp.
    """

    tracking_id: str
    scan_time: datetime


@dataclass(frozen=True)
class RegionEfficiencyEntry:
    """Throughput of a single operator within one region.

    Attributes:
        region_key: Single-character region key.
        scan_count: Number of the operator's scans resolved to the region.
        working_hours: Span between the first and last of those scans.
        efficiency: Scans per hour, or 0 when `working_hours` is 0.
    """

    region_key: str
    scan_count: int
    working_hours: float
    efficiency: float


@dataclass(frozen=True)
class OperatorEfficiencyReport:
    """Overall and per-region throughput for one operator.

    Attributes:
        name: Operator name.
        scan_count: Number of scans (not deduplicated by tracking id).
        working_hours: Span between the operator's first and last scan.
        total_efficiency: Scans per hour, or 0 when `working_hours` is 0.
        first_scan_time: Earliest scan timestamp.
        last_scan_time: Latest scan timestamp.
        region_efficiencies: Per-region entries sorted by efficiency.
    """

    name: str
    scan_count: int
    working_hours: float
    total_efficiency: float
    first_scan_time: datetime | None
    last_scan_time: datetime | None
    region_efficiencies: tuple[RegionEfficiencyEntry, ...] = ()


@dataclass(frozen=True)
class RegionSummaryEntry:
    """Region-level throughput aggregated across every operator.

    Attributes:
        region_key: Single-character region key.
        total_scans: Number of resolved scans in the region.
        operator_count: Distinct operators who scanned into the region.
        efficiency: Scans per summed tracking-id hour, or 0.
        average_per_operator: `total_scans / operator_count`.
        total_working_hours: Sum of each tracking id's own scan span.
    """

    region_key: str
    total_scans: int
    operator_count: int
    efficiency: float
    average_per_operator: float
    total_working_hours: float


@dataclass(frozen=True)
class AnalysisResult:
    """Container for one sorting-efficiency analysis run.

    Attributes:
        operators: Operator reports sorted by total efficiency.
        total_scans: Number of scan rows supplied, including skipped ones.
        average_total_efficiency: Unweighted mean of operator total efficiency.
        region_summary: Region entries sorted by efficiency.
        processed_at: When the analysis ran (UTC).
        skipped_scans: Events dropped for missing or unparseable fields.
        unmatched_scans: Valid events whose tracking id has no route.
    """

    operators: tuple[OperatorEfficiencyReport, ...]
    total_scans: int
    average_total_efficiency: float
    region_summary: tuple[RegionSummaryEntry, ...]
    processed_at: datetime
    skipped_scans: int = 0
    unmatched_scans: int = 0
