"""Fixtures for unit tests that touch application settings."""

import os

import pytest

from crm_sales.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Drop cached settings and any CRM_SALES_ variables from the host."""
    for key in list(os.environ):
        if key.upper().startswith("CRM_SALES_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
