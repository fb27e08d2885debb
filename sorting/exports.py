"""CSV and Excel export of efficiency analysis results."""

from __future__ import annotations

import csv
from pathlib import Path

from openpyxl import Workbook

from efficiency.dto import AnalysisResult
from efficiency.export import (
    OPERATOR_HEADERS,
    OPERATOR_REGION_HEADERS,
    REGION_SUMMARY_HEADERS,
    operator_region_rows,
    operator_rows,
    region_summary_rows,
)

OPERATORS_FILENAME = "operators.csv"
OPERATOR_REGIONS_FILENAME = "operator_regions.csv"
REGION_SUMMARY_FILENAME = "region_summary.csv"

OPERATORS_SHEET = "Operators"
OPERATOR_REGIONS_SHEET = "Operator Regions"
REGION_SUMMARY_SHEET = "Region Summary"


def write_analysis_csvs(result: AnalysisResult, directory: Path) -> list[Path]:
    """Write the operator, operator-region, and region summary sheets.

    Args:
        result: AnalysisResult to export.
        directory: Output directory; created when missing.

    Returns:
        Paths of the files written. The operator-region and region summary
        sheets are only written when they have rows.
    """

    directory.mkdir(parents=True, exist_ok=True)
    written = [_write_csv(directory / OPERATORS_FILENAME, OPERATOR_HEADERS, operator_rows(result))]

    region_rows = operator_region_rows(result)
    if region_rows:
        written.append(_write_csv(directory / OPERATOR_REGIONS_FILENAME, OPERATOR_REGION_HEADERS, region_rows))

    summary_rows = region_summary_rows(result)
    if summary_rows:
        written.append(_write_csv(directory / REGION_SUMMARY_FILENAME, REGION_SUMMARY_HEADERS, summary_rows))
    return written


def write_analysis_workbook(result: AnalysisResult, path: Path) -> Path:
    """Write a single workbook with one sheet per export table.

    Args:
        result: AnalysisResult to export.
        path: Destination `.xlsx` path; its parent directory is created when missing.

    Returns:
        The path written. The operator-region and region summary sheets are
        only added when they have rows.
    """

    workbook = Workbook()
    operators_sheet = workbook.active
    operators_sheet.title = OPERATORS_SHEET
    _fill_sheet(operators_sheet, OPERATOR_HEADERS, operator_rows(result))

    region_rows = operator_region_rows(result)
    if region_rows:
        _fill_sheet(workbook.create_sheet(OPERATOR_REGIONS_SHEET), OPERATOR_REGION_HEADERS, region_rows)

    summary_rows = region_summary_rows(result)
    if summary_rows:
        _fill_sheet(workbook.create_sheet(REGION_SUMMARY_SHEET), REGION_SUMMARY_HEADERS, summary_rows)

    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    return path


def _write_csv(path: Path, headers: tuple[str, ...], rows: list[list[object]]) -> Path:
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(headers)
        writer.writerows(rows)
    return path


def _fill_sheet(sheet, headers: tuple[str, ...], rows: list[list[object]]) -> None:
    sheet.append(list(headers))
    for row in rows:
        sheet.append(row)
