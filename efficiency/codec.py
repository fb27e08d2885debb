"""Encoding/decoding helpers for persisting AnalysisResult payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, cast

from .dto import AnalysisResult, OperatorEfficiencyReport, RegionEfficiencyEntry, RegionSummaryEntry
from .timestamps import coerce_scan_time


def encode_analysis_result(result: AnalysisResult) -> dict[str, Any]:
    """Encode an AnalysisResult into a JSON-serializable dictionary.

    Args:
        result: AnalysisResult to encode.

    Returns:
        Dict payload safe for JSONField storage.
    """

    return {
        "operators": [encode_operator(operator) for operator in result.operators],
        "total_scans": result.total_scans,
        "average_total_efficiency": result.average_total_efficiency,
        "region_summary": [encode_region_summary(entry) for entry in result.region_summary],
        "processed_at": result.processed_at.isoformat(),
        "skipped_scans": result.skipped_scans,
        "unmatched_scans": result.unmatched_scans,
    }


def encode_operator(operator: OperatorEfficiencyReport) -> dict[str, Any]:
    """Encode a single operator report."""

    return {
        "name": operator.name,
        "scan_count": operator.scan_count,
        "working_hours": operator.working_hours,
        "total_efficiency": operator.total_efficiency,
        "first_scan_time": _encode_datetime(operator.first_scan_time),
        "last_scan_time": _encode_datetime(operator.last_scan_time),
        "region_efficiencies": [
            {
                "region_key": entry.region_key,
                "scan_count": entry.scan_count,
                "working_hours": entry.working_hours,
                "efficiency": entry.efficiency,
            }
            for entry in operator.region_efficiencies
        ],
    }


def encode_region_summary(entry: RegionSummaryEntry) -> dict[str, Any]:
    """Encode a single global region summary entry."""

    return {
        "region_key": entry.region_key,
        "total_scans": entry.total_scans,
        "operator_count": entry.operator_count,
        "efficiency": entry.efficiency,
        "average_per_operator": entry.average_per_operator,
        "total_working_hours": entry.total_working_hours,
    }


def decode_analysis_result(payload: dict[str, Any]) -> AnalysisResult:
    """Decode an AnalysisResult from a stored payload dictionary.

    Args:
        payload: Payload previously produced by `encode_analysis_result`.

    Returns:
        AnalysisResult instance.

    Raises:
        ValueError: When required fields are missing or invalid.
    """

    processed_at = coerce_scan_time(payload.get("processed_at"))
    if processed_at is None:
        raise ValueError("processed_at is missing or invalid.")

    operators = tuple(
        _decode_operator(cast(dict[str, Any], raw)) for raw in _require_list(payload, "operators")
    )
    region_summary = tuple(
        RegionSummaryEntry(
            region_key=_require_str(raw, "region_key"),
            total_scans=int(raw.get("total_scans") or 0),
            operator_count=int(raw.get("operator_count") or 0),
            efficiency=float(raw.get("efficiency") or 0.0),
            average_per_operator=float(raw.get("average_per_operator") or 0.0),
            total_working_hours=float(raw.get("total_working_hours") or 0.0),
        )
        for raw in _require_list(payload, "region_summary")
    )
    return AnalysisResult(
        operators=operators,
        total_scans=int(payload.get("total_scans") or 0),
        average_total_efficiency=float(payload.get("average_total_efficiency") or 0.0),
        region_summary=region_summary,
        processed_at=processed_at,
        skipped_scans=int(payload.get("skipped_scans") or 0),
        unmatched_scans=int(payload.get("unmatched_scans") or 0),
    )


def _decode_operator(raw: dict[str, Any]) -> OperatorEfficiencyReport:
    return OperatorEfficiencyReport(
        name=_require_str(raw, "name"),
        scan_count=int(raw.get("scan_count") or 0),
        working_hours=float(raw.get("working_hours") or 0.0),
        total_efficiency=float(raw.get("total_efficiency") or 0.0),
        first_scan_time=coerce_scan_time(raw.get("first_scan_time")),
        last_scan_time=coerce_scan_time(raw.get("last_scan_time")),
        region_efficiencies=tuple(
            RegionEfficiencyEntry(
                region_key=_require_str(entry, "region_key"),
                scan_count=int(entry.get("scan_count") or 0),
                working_hours=float(entry.get("working_hours") or 0.0),
                efficiency=float(entry.get("efficiency") or 0.0),
            )
            for entry in _require_list(raw, "region_efficiencies")
        ),
    )


def _encode_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _require_list(payload: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = payload.get(key)
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a list.")
    for item in value:
        if not isinstance(item, dict):
            raise ValueError(f"{key} entries must be objects.")
    return value


def _require_str(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{key} must be a non-empty string.")
    return value
