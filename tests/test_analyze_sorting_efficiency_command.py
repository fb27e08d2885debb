"""Integration tests for the analyze_sorting_efficiency management command."""

from __future__ import annotations

import csv
import json
from datetime import date
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from openpyxl import load_workbook

from sorting.models import EfficiencyAnalysis

pytestmark = pytest.mark.integration

SCAN_ROWS = [
    ["tracking_number", "operate", "time"],
    ["T1", "Alice", "2025-12-01 08:00:00"],
    ["T1", "Alice", "2025-12-01 08:10:00"],
    ["T2", "Alice", "2025-12-01 09:00:00"],
    ["T3", "Bob", "2025-12-01 09:00:00"],
]
ROUTE_ROWS = [
    ["tracking_number", "route_number"],
    ["T1", "P100"],
    ["T2", "X200"],
]


@pytest.mark.django_db
def test_write_stores_analysis(write_csv) -> None:
    """--write persists one EfficiencyAnalysis with raw row counts."""

    scans = write_csv("scans.csv", SCAN_ROWS)
    routes = write_csv("routes.csv", ROUTE_ROWS)
    out = StringIO()

    call_command(
        "analyze_sorting_efficiency",
        "--scans", str(scans),
        "--routes", str(routes),
        "--region", "MEL",
        "--date", "2025-12-01",
        "--write",
        stdout=out,
    )

    analysis = EfficiencyAnalysis.objects.get()
    assert analysis.region == "MEL"
    assert analysis.analysis_date == date(2025, 12, 1)
    assert analysis.total_scans == 4
    assert analysis.scanning_data_count == 4
    assert analysis.route_data_count == 2
    assert analysis.unmatched_scans == 1
    assert analysis.average_total_efficiency == pytest.approx(1.5)
    assert "[WRITE]" in out.getvalue()


@pytest.mark.django_db
def test_check_exports_csvs_without_writing(write_csv, tmp_path) -> None:
    """--check with --export-dir writes the three sheets and no rows."""

    scans = write_csv("scans.csv", SCAN_ROWS)
    routes = write_csv("routes.csv", ROUTE_ROWS)
    export_dir = tmp_path / "export"
    out = StringIO()

    call_command(
        "analyze_sorting_efficiency",
        "--scans", str(scans),
        "--routes", str(routes),
        "--check",
        "--export-dir", str(export_dir),
        stdout=out,
    )

    assert not EfficiencyAnalysis.objects.exists()
    assert "[CHECK]" in out.getvalue()
    with open(export_dir / "operators.csv", newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0][:3] == ["rank", "operator", "scan_count"]
    assert [row[1] for row in rows[1:]] == ["Alice", "Bob"]
    assert (export_dir / "operator_regions.csv").exists()
    assert (export_dir / "region_summary.csv").exists()


@pytest.mark.django_db
def test_json_output_contains_encoded_result(write_csv) -> None:
    """--json prints the encoded result before the summary line."""

    scans = write_csv("scans.csv", SCAN_ROWS)
    routes = write_csv("routes.csv", ROUTE_ROWS)
    out = StringIO()

    call_command(
        "analyze_sorting_efficiency",
        "--scans", str(scans),
        "--routes", str(routes),
        "--check",
        "--json",
        stdout=out,
    )

    text = out.getvalue()
    payload = json.loads(text[: text.rindex("[CHECK]")])
    assert payload["total_scans"] == 4
    assert [entry["region_key"] for entry in payload["region_summary"]] == ["P", "X"]


@pytest.mark.django_db
def test_empty_scan_sheet_is_a_command_error(write_csv) -> None:
    """A scan sheet without data rows fails with a clear message."""

    scans = write_csv("scans.csv", [["tracking_number", "operate", "time"]])
    routes = write_csv("routes.csv", ROUTE_ROWS)

    with pytest.raises(CommandError, match="at least one data row"):
        call_command("analyze_sorting_efficiency", "--scans", str(scans), "--routes", str(routes), "--check")


@pytest.mark.django_db
def test_missing_scan_column_is_a_command_error(write_csv) -> None:
    """Engine validation failures are surfaced as CommandError."""

    scans = write_csv("scans.csv", [["tracking_number", "operate"], ["T1", "Alice"]])
    routes = write_csv("routes.csv", ROUTE_ROWS)

    with pytest.raises(CommandError, match="scan data missing field: scanTime"):
        call_command("analyze_sorting_efficiency", "--scans", str(scans), "--routes", str(routes), "--check")


@pytest.mark.django_db
def test_requires_explicit_intent_and_region(write_csv) -> None:
    """The command refuses to run without --check/--write, or --write without --region."""

    scans = write_csv("scans.csv", SCAN_ROWS)
    routes = write_csv("routes.csv", ROUTE_ROWS)

    with pytest.raises(CommandError, match="explicit intent"):
        call_command("analyze_sorting_efficiency", "--scans", str(scans), "--routes", str(routes))
    with pytest.raises(CommandError, match="--region is required"):
        call_command("analyze_sorting_efficiency", "--scans", str(scans), "--routes", str(routes), "--write")
    with pytest.raises(CommandError, match="not both"):
        call_command(
            "analyze_sorting_efficiency", "--scans", str(scans), "--routes", str(routes), "--check", "--write"
        )


@pytest.mark.django_db
def test_reads_workbooks_and_exports_workbook(write_xlsx, tmp_path) -> None:
    """Workbook inputs are analyzed and --export-xlsx writes the result workbook."""

    scans = write_xlsx("scans.xlsx", SCAN_ROWS)
    routes = write_xlsx("routes.xlsx", ROUTE_ROWS)
    target = tmp_path / "export" / "efficiency.xlsx"
    out = StringIO()

    call_command(
        "analyze_sorting_efficiency",
        "--scans", str(scans),
        "--routes", str(routes),
        "--check",
        "--export-xlsx", str(target),
        stdout=out,
    )

    assert f"Wrote {target}" in out.getvalue()
    workbook = load_workbook(target, read_only=True)
    try:
        assert workbook.sheetnames == ["Operators", "Operator Regions", "Region Summary"]
        operators = list(workbook["Operators"].iter_rows(values_only=True))
    finally:
        workbook.close()
    assert [row[1] for row in operators[1:]] == ["Alice", "Bob"]
    assert not EfficiencyAnalysis.objects.exists()
