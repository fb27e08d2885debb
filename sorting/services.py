"""Service-layer functions for the sorting app.

Services coordinate Django persistence concerns (ORM, transactions) with the
pure efficiency engine.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from django.db import transaction
from django.db.models import QuerySet

from efficiency.codec import decode_analysis_result, encode_analysis_result
from efficiency.dto import AnalysisResult
from efficiency.engine import analyze_sorting_efficiency
from sorting.models import EfficiencyAnalysis

logger = logging.getLogger(__name__)


def run_efficiency_analysis(scans: Sequence[object], routes: Sequence[object]) -> AnalysisResult:
    """Run the efficiency engine and log a summary of the result.

    Args:
        scans: Normalized scan records.
        routes: Normalized route assignment records.

    Returns:
        AnalysisResult from the engine.

    Raises:
        efficiency.errors.ValidationError: When either input is empty or malformed.
    """

    result = analyze_sorting_efficiency(scans, routes)
    logger.info(
        "Analyzed %d scans across %d operators and %d regions (average %.2f scans/hour).",
        result.total_scans,
        len(result.operators),
        len(result.region_summary),
        result.average_total_efficiency,
    )
    if result.skipped_scans:
        logger.warning("Skipped %d scan rows with missing or invalid fields.", result.skipped_scans)
    if result.unmatched_scans:
        logger.warning(
            "%d scans have no route assignment and are excluded from region figures.",
            result.unmatched_scans,
        )
    return result


def store_efficiency_analysis(
    result: AnalysisResult,
    *,
    region: str,
    analysis_date: date,
    scanning_data_count: int,
    route_data_count: int,
) -> EfficiencyAnalysis:
    """Persist an engine result for a warehouse region and date.

    Args:
        result: AnalysisResult to store.
        region: EfficiencyAnalysis.Region value.
        analysis_date: Business date the scans belong to.
        scanning_data_count: Number of raw scan rows supplied.
        route_data_count: Number of raw route rows supplied.

    Returns:
        The created EfficiencyAnalysis row.

    Raises:
        ValueError: When `region` is not a known region.
    """

    if region not in EfficiencyAnalysis.Region.values:
        raise ValueError(f"Unknown region {region!r}; expected one of {EfficiencyAnalysis.Region.values}.")

    payload = encode_analysis_result(result)
    with transaction.atomic():
        analysis = EfficiencyAnalysis.objects.create(
            region=region,
            analysis_date=analysis_date,
            total_scans=result.total_scans,
            average_total_efficiency=result.average_total_efficiency,
            operators=payload["operators"],
            region_summary=payload["region_summary"],
            scanning_data_count=scanning_data_count,
            route_data_count=route_data_count,
            unmatched_scans=result.unmatched_scans,
            skipped_scans=result.skipped_scans,
            processed_at=result.processed_at,
        )
    logger.info("Stored efficiency analysis %s for %s on %s.", analysis.pk, region, analysis_date.isoformat())
    return analysis


def list_efficiency_analyses(
    *,
    region: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> QuerySet[EfficiencyAnalysis]:
    """Return stored analyses, newest first.

    Args:
        region: Optional region filter.
        start_date: Inclusive range start; alone, it selects that exact date.
        end_date: Inclusive range end; ignored without `start_date`.

    Returns:
        QuerySet of EfficiencyAnalysis rows ordered by creation time (descending).
    """

    queryset = EfficiencyAnalysis.objects.all()
    if region:
        queryset = queryset.filter(region=region)
    if start_date is not None and end_date is not None:
        queryset = queryset.filter(analysis_date__gte=start_date, analysis_date__lte=end_date)
    elif start_date is not None:
        queryset = queryset.filter(analysis_date=start_date)
    return queryset.order_by("-created_at", "-id")


def load_analysis_result(analysis: EfficiencyAnalysis) -> AnalysisResult:
    """Rebuild the engine DTO from a stored EfficiencyAnalysis row.

    Raises:
        ValueError: When the stored payload is malformed.
    """

    return decode_analysis_result(
        {
            "operators": analysis.operators,
            "total_scans": analysis.total_scans,
            "average_total_efficiency": analysis.average_total_efficiency,
            "region_summary": analysis.region_summary,
            "processed_at": analysis.processed_at.isoformat(),
            "skipped_scans": analysis.skipped_scans,
            "unmatched_scans": analysis.unmatched_scans,
        }
    )
