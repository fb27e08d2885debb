"""Tests for project settings."""

from __future__ import annotations

import pytest
from django.conf import settings

pytestmark = pytest.mark.unit


def test_settings_register_sorting_app_and_logger() -> None:
    """The sorting app is installed and its logger writes to the console."""

    assert "sorting.apps.SortingConfig" in settings.INSTALLED_APPS
    assert settings.LOGGING["loggers"]["sorting"]["handlers"] == ["console"]


def test_settings_keep_to_admin_and_command_needs() -> None:
    """Only the settings the admin and analysis command rely on are configured."""

    assert settings.AUTH_PASSWORD_VALIDATORS == []
    assert settings.SECURE_HSTS_SECONDS == 0
    assert settings.SECURE_PROXY_SSL_HEADER is None
