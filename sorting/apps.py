"""App configuration for the sorting Django app."""

from __future__ import annotations

from django.apps import AppConfig


class SortingConfig(AppConfig):
    """Configuration for the `sorting` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "sorting"
    verbose_name = "Sorting Efficiency"
