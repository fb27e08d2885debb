"""Database models for persisted sorting-efficiency analyses."""

from __future__ import annotations

from django.db import models


class EfficiencyAnalysis(models.Model):
    """One stored run of the sorting-efficiency engine for a warehouse region.

    `operators` and `region_summary` hold the encoded engine output so history
    can be re-rendered without the original scan exports.
    """

    class Region(models.TextChoices):
        """Warehouse regions that upload scan exports."""

        SA = "SA", "Adelaide"
        SYD = "SYD", "Sydney"
        MEL = "MEL", "Melbourne"
        BNE = "BNE", "Brisbane"
        PER = "PER", "Perth"

    region = models.CharField(max_length=8, choices=Region.choices, db_index=True)
    analysis_date = models.DateField(db_index=True)
    total_scans = models.PositiveIntegerField(default=0)
    average_total_efficiency = models.FloatField(default=0.0)
    operators = models.JSONField(default=list, blank=True)
    region_summary = models.JSONField(default=list, blank=True)
    scanning_data_count = models.PositiveIntegerField(default=0)
    route_data_count = models.PositiveIntegerField(default=0)
    unmatched_scans = models.PositiveIntegerField(default=0)
    skipped_scans = models.PositiveIntegerField(default=0)
    processed_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["region", "analysis_date"], name="sorting_eff_region_date_idx"),
        ]
        verbose_name = "Efficiency Analysis"
        verbose_name_plural = "Efficiency Analyses"

    def __str__(self) -> str:
        """Return a concise display string for admin/debug usage."""

        return f"EfficiencyAnalysis(region={self.region}, date={self.analysis_date.isoformat()}, scans={self.total_scans})"
