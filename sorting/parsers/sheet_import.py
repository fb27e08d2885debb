"""Scan and route sheet import utilities.

Warehouse exports arrive as Excel workbooks or CSV files whose column names
vary by scanner vendor and locale. This module maps those headers onto
canonical field names so the efficiency engine only ever sees `trackingId`,
`operator`, `scanTime`, and `routeCode`.

- Unknown columns are ignored.
- Blank rows and blank cells are dropped.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException


class SheetImportError(ValueError):
    """Raised when a sheet cannot be read or has no usable columns."""


HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "trackingId": (
        "tracking_number",
        "trackingnumber",
        "tracking",
        "tracking_id",
        "trackingid",
        "快递单号",
        "运单号",
    ),
    "operator": ("operate", "operator", "分拣员", "操作员"),
    "scanTime": ("time", "scan_time", "scantime", "扫描时间", "操作时间"),
    "routeCode": (
        "route_number",
        "routenumber",
        "route",
        "route_code",
        "routecode",
        "区号",
        "路由号",
    ),
}

WORKBOOK_SUFFIXES = (".xlsx", ".xlsm")

_ALIAS_TO_FIELD = {alias: field for field, aliases in HEADER_ALIASES.items() for alias in aliases}


def map_headers(headers: Sequence[object]) -> dict[int, str]:
    """Map header positions onto canonical field names.

    Args:
        headers: Raw header row; workbook header cells may be None or non-text.

    Returns:
        Mapping of column index -> canonical field name for recognised headers.
    """

    mapping: dict[int, str] = {}
    for index, header in enumerate(headers):
        normalized = _cell_value(header)
        if not isinstance(normalized, str):
            continue
        field = _ALIAS_TO_FIELD.get(normalized.lower())
        if field is not None:
            mapping[index] = field
    return mapping


def normalize_rows(rows: Iterable[Sequence[object]]) -> list[dict[str, object]]:
    """Normalize a header row plus data rows into canonical records.

    Args:
        rows: Sheet rows where the first row is the header. Cells are strings
            for CSV sheets, or typed values (datetime, numbers) for workbooks.

    Returns:
        One dict per non-blank data row, keyed by canonical field name. Text
        cells are trimmed; typed cells are passed through unchanged.

    Raises:
        SheetImportError: When the sheet has no data rows or no recognised headers.
    """

    materialized = [list(row) for row in rows]
    if len(materialized) < 2:
        raise SheetImportError("Sheet must contain a header row and at least one data row.")

    header_map = map_headers(materialized[0])
    if not header_map:
        raise SheetImportError(f"No recognised columns in header: {materialized[0]!r}")

    records: list[dict[str, object]] = []
    for row in materialized[1:]:
        if all(_cell_value(cell) is None for cell in row):
            continue
        record: dict[str, object] = {}
        for index, field in header_map.items():
            if index >= len(row):
                continue
            value = _cell_value(row[index])
            if value is not None:
                record[field] = value
        records.append(record)
    return records


def read_sheet(path: Path | str) -> list[dict[str, object]]:
    """Read a scan or route export from disk into canonical records.

    Args:
        path: Path to an `.xlsx`/`.xlsm` workbook (first worksheet is read) or
            a UTF-8 CSV file (a leading BOM is tolerated).

    Returns:
        Normalized records as produced by `normalize_rows`.

    Raises:
        SheetImportError: When the file cannot be read or parsed.
    """

    if Path(path).suffix.lower() in WORKBOOK_SUFFIXES:
        return normalize_rows(_read_workbook_rows(path))

    try:
        with open(path, newline="", encoding="utf-8-sig") as handle:
            rows = list(csv.reader(handle))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise SheetImportError(f"Could not read sheet {str(path)!r}: {exc}") from exc
    return normalize_rows(rows)


def _read_workbook_rows(path: Path | str) -> list[tuple[object, ...]]:
    """Return the cell values of a workbook's first worksheet."""

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (OSError, InvalidFileException, BadZipFile, KeyError) as exc:
        raise SheetImportError(f"Could not read workbook {str(path)!r}: {exc}") from exc
    try:
        if not workbook.worksheets:
            raise SheetImportError(f"Workbook {str(path)!r} has no worksheets.")
        return list(workbook.worksheets[0].iter_rows(values_only=True))
    finally:
        workbook.close()


def _cell_value(cell: object) -> object | None:
    """Return a trimmed string or typed cell value, or None for a blank cell."""

    if cell is None:
        return None
    if isinstance(cell, str):
        cleaned = cell.strip()
        return cleaned or None
    return cell
