"""Analyze scan and route exports and optionally store the result."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from efficiency.codec import encode_analysis_result
from efficiency.errors import ValidationError
from sorting.exports import write_analysis_csvs, write_analysis_workbook
from sorting.models import EfficiencyAnalysis
from sorting.parsers.sheet_import import SheetImportError, read_sheet
from sorting.services import run_efficiency_analysis, store_efficiency_analysis


class Command(BaseCommand):
    """Run the sorting-efficiency engine over sheet exports."""

    help = "Analyze sorting efficiency from scan and route exports (--check or --write)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("--scans", required=True, help="Path to the scan export (.xlsx or .csv).")
        parser.add_argument("--routes", required=True, help="Path to the route assignment export (.xlsx or .csv).")
        parser.add_argument(
            "--region",
            choices=EfficiencyAnalysis.Region.values,
            default=None,
            help="Warehouse region the scans belong to (required with --write).",
        )
        parser.add_argument(
            "--date",
            default=None,
            help="Analysis date as YYYY-MM-DD (defaults to today).",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Dry-run: analyze and report without writing.",
        )
        parser.add_argument(
            "--write",
            action="store_true",
            help="Store the analysis in the database.",
        )
        parser.add_argument(
            "--export-dir",
            default=None,
            help="Optional directory to write operator/region CSV sheets into.",
        )
        parser.add_argument(
            "--export-xlsx",
            default=None,
            help="Optional .xlsx path to write a workbook with operator/region sheets.",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the full encoded result as JSON.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        check: bool = options["check"]
        write: bool = options["write"]
        region: str | None = options["region"]

        if check and write:
            raise CommandError("Use either --check or --write, not both.")
        if not check and not write:
            raise CommandError("Refusing to run without explicit intent; pass --check or --write.")
        if write and not region:
            raise CommandError("--region is required with --write.")

        analysis_date = _parse_date(options["date"])

        try:
            scans = read_sheet(options["scans"])
            routes = read_sheet(options["routes"])
        except SheetImportError as exc:
            raise CommandError(str(exc)) from exc

        try:
            result = run_efficiency_analysis(scans, routes)
        except ValidationError as exc:
            raise CommandError(f"Invalid input: {exc.message}") from exc

        if options["export_dir"]:
            for path in write_analysis_csvs(result, Path(options["export_dir"])):
                self.stdout.write(f"Wrote {path}")

        if options["export_xlsx"]:
            path = write_analysis_workbook(result, Path(options["export_xlsx"]))
            self.stdout.write(f"Wrote {path}")

        if options["json"]:
            self.stdout.write(json.dumps(encode_analysis_result(result), ensure_ascii=False, indent=2))

        if write:
            assert region is not None
            store_efficiency_analysis(
                result,
                region=region,
                analysis_date=analysis_date,
                scanning_data_count=len(scans),
                route_data_count=len(routes),
            )

        totals = {
            "operators": len(result.operators),
            "total_scans": result.total_scans,
            "average_total_efficiency": round(result.average_total_efficiency, 2),
            "regions": len(result.region_summary),
            "unmatched_scans": result.unmatched_scans,
            "skipped_scans": result.skipped_scans,
        }
        mode = "CHECK" if check else "WRITE"
        self.stdout.write(f"[{mode}] {totals}")
        return None


def _parse_date(raw: str | None) -> date:
    """Parse the --date option, defaulting to today."""

    if raw is None:
        return date.today()
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise CommandError(f"Invalid --date {raw!r}; expected YYYY-MM-DD.") from exc
