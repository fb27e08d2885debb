"""Admin registrations for sorting models."""

from __future__ import annotations

from django.contrib import admin

from sorting.models import EfficiencyAnalysis


@admin.register(EfficiencyAnalysis)
class EfficiencyAnalysisAdmin(admin.ModelAdmin):
    """Admin configuration for EfficiencyAnalysis."""

    list_display = (
        "region",
        "analysis_date",
        "total_scans",
        "average_total_efficiency",
        "unmatched_scans",
        "processed_at",
    )
    list_filter = ("region", "analysis_date")
    date_hierarchy = "analysis_date"
    readonly_fields = ("operators", "region_summary", "processed_at", "created_at", "updated_at")
