"""Create the EfficiencyAnalysis table."""

from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    """Initial schema for persisted sorting-efficiency analyses."""

    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="EfficiencyAnalysis",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "region",
                    models.CharField(
                        choices=[
                            ("SA", "Adelaide"),
                            ("SYD", "Sydney"),
                            ("MEL", "Melbourne"),
                            ("BNE", "Brisbane"),
                            ("PER", "Perth"),
                        ],
                        db_index=True,
                        max_length=8,
                    ),
                ),
                ("analysis_date", models.DateField(db_index=True)),
                ("total_scans", models.PositiveIntegerField(default=0)),
                ("average_total_efficiency", models.FloatField(default=0.0)),
                ("operators", models.JSONField(blank=True, default=list)),
                ("region_summary", models.JSONField(blank=True, default=list)),
                ("scanning_data_count", models.PositiveIntegerField(default=0)),
                ("route_data_count", models.PositiveIntegerField(default=0)),
                ("unmatched_scans", models.PositiveIntegerField(default=0)),
                ("skipped_scans", models.PositiveIntegerField(default=0)),
                ("processed_at", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Efficiency Analysis",
                "verbose_name_plural": "Efficiency Analyses",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["region", "analysis_date"], name="sorting_eff_region_date_idx"),
                ],
            },
        ),
    ]
