"""
Unit tests for ValidateLicenseHandler.
"""
import pytest

from core.domain.exceptions import (
    EmailRequiredError,
    LicenseStoreError,
    StoreNotConfiguredError,
)
from licenses.application.handlers.validate_license_handler import ValidateLicenseHandler
from licenses.application.queries.validate_license import ValidateLicenseQuery
from tests.fakes import InMemoryLicenseRepository


@pytest.mark.asyncio
class TestValidateLicenseHandler:
    """Tests for ValidateLicenseHandler."""

    async def test_existing_record_is_authorized(self):
        """Test that an email with a record is authorized."""
        handler = ValidateLicenseHandler(InMemoryLicenseRepository(emails=["a@x.com"]))

        result = await handler.handle(ValidateLicenseQuery(email="a@x.com"))

        assert result.authorized is True

    async def test_missing_record_is_not_authorized(self, license_repository):
        """Test that an email without a record is not authorized."""
        handler = ValidateLicenseHandler(license_repository)

        result = await handler.handle(ValidateLicenseQuery(email="nobody@x.com"))

        assert result.authorized is False

    async def test_lookup_is_case_sensitive(self):
        """Test that emails are compared exactly as received."""
        handler = ValidateLicenseHandler(InMemoryLicenseRepository(emails=["a@x.com"]))

        result = await handler.handle(ValidateLicenseQuery(email="A@x.com"))

        assert result.authorized is False

    async def test_validation_never_writes(self, license_repository):
        """Test that the validate path is read only."""
        handler = ValidateLicenseHandler(license_repository)

        await handler.handle(ValidateLicenseQuery(email="a@x.com"))

        assert license_repository.mutations == []
        assert license_repository.records == {}

    @pytest.mark.parametrize("email", [None, ""])
    async def test_email_required(self, license_repository, email):
        """Test that a missing email is rejected without a store call."""
        handler = ValidateLicenseHandler(license_repository)

        with pytest.raises(EmailRequiredError) as exc_info:
            await handler.handle(ValidateLicenseQuery(email=email))

        assert exc_info.value.to_dict() == {"ok": False, "error": "Email is required"}
        assert license_repository.calls == []

    async def test_unconfigured_store_checked_first(self):
        """Test that configuration is checked before input."""
        handler = ValidateLicenseHandler(None)

        with pytest.raises(StoreNotConfiguredError) as exc_info:
            await handler.handle(ValidateLicenseQuery(email=None))

        assert exc_info.value.to_dict() == {
            "ok": False,
            "error": "Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY",
        }

    async def test_store_error_propagates(self, license_repository):
        """Test that store failures propagate with their message."""
        license_repository.fail_with = "permission denied for table licenses"
        handler = ValidateLicenseHandler(license_repository)

        with pytest.raises(LicenseStoreError) as exc_info:
            await handler.handle(ValidateLicenseQuery(email="a@x.com"))

        assert exc_info.value.to_dict() == {
            "ok": False,
            "error": "Internal error",
            "details": "permission denied for table licenses",
        }
