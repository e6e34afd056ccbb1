"""
Pytest configuration and shared fixtures.
"""

import pytest
from django.apps import apps

from tests.fakes import WEBHOOK_SECRET, InMemoryLicenseRepository
from webhooks.domain.services import WebhookAuthenticator


@pytest.fixture
def license_repository():
    """Fixture for an empty in-memory license store."""
    return InMemoryLicenseRepository()


@pytest.fixture
def authenticator():
    """Fixture for WebhookAuthenticator with the test secret."""
    return WebhookAuthenticator(WEBHOOK_SECRET)


@pytest.fixture
def installed_repository(license_repository, monkeypatch):
    """Install the in-memory store as the process-wide license store."""
    monkeypatch.setattr(
        apps.get_app_config("licenses"), "license_repository", license_repository
    )
    return license_repository


@pytest.fixture
def unconfigured_store(monkeypatch):
    """Run with no license store configured."""
    monkeypatch.setattr(apps.get_app_config("licenses"), "license_repository", None)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
