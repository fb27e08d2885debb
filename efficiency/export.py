"""Tabular renderings of an AnalysisResult for spreadsheet export.

Rows are plain lists of strings/ints so any writer (csv, xlsx) can consume them.
"""

from __future__ import annotations

from .aggregations import mean
from .dto import AnalysisResult, OperatorEfficiencyReport

OPERATOR_HEADERS = (
    "rank",
    "operator",
    "scan_count",
    "working_hours",
    "total_efficiency",
    "first_scan_time",
    "last_scan_time",
    "region_breakdown",
    "average_region_efficiency",
)

OPERATOR_REGION_HEADERS = (
    "operator",
    "region",
    "scan_count",
    "working_hours",
    "efficiency",
)

REGION_SUMMARY_HEADERS = (
    "region",
    "total_scans",
    "operator_count",
    "efficiency",
    "average_per_operator",
)


def operator_rows(result: AnalysisResult) -> list[list[object]]:
    """Return one ranked row per operator."""

    rows: list[list[object]] = []
    for rank, operator in enumerate(result.operators, start=1):
        rows.append(
            [
                rank,
                operator.name,
                operator.scan_count,
                _fixed(operator.working_hours, 2),
                _fixed(operator.total_efficiency, 2),
                operator.first_scan_time.isoformat() if operator.first_scan_time else "-",
                operator.last_scan_time.isoformat() if operator.last_scan_time else "-",
                region_breakdown(operator),
                _fixed(mean(entry.efficiency for entry in operator.region_efficiencies), 2),
            ]
        )
    return rows


def operator_region_rows(result: AnalysisResult) -> list[list[object]]:
    """Return one row per operator x region entry, in ranked operator order."""

    rows: list[list[object]] = []
    for operator in result.operators:
        for entry in operator.region_efficiencies:
            rows.append(
                [
                    operator.name,
                    entry.region_key,
                    entry.scan_count,
                    _fixed(entry.working_hours, 2),
                    _fixed(entry.efficiency, 2),
                ]
            )
    return rows


def region_summary_rows(result: AnalysisResult) -> list[list[object]]:
    """Return one row per global region summary entry."""

    return [
        [
            entry.region_key,
            entry.total_scans,
            entry.operator_count,
            _fixed(entry.efficiency, 2),
            _fixed(entry.average_per_operator, 0),
        ]
        for entry in result.region_summary
    ]


def region_breakdown(operator: OperatorEfficiencyReport) -> str:
    """Summarize an operator's regions as `"P:2; X:1"`."""

    return "; ".join(f"{entry.region_key}:{entry.scan_count}" for entry in operator.region_efficiencies)


def _fixed(value: float, places: int) -> str:
    return f"{value:.{places}f}"
