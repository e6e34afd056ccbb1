"""
Unit tests for SupabaseLicenseRepository with a mocked client.
"""
from unittest.mock import MagicMock

import httpx
import pytest
from postgrest.exceptions import APIError

from core.domain.exceptions import LicenseStoreError
from licenses.infrastructure.repositories.supabase_license_repository import (
    NOT_FOUND_CODE,
    SupabaseLicenseRepository,
    build_license_repository,
)


def api_error(code, message):
    return APIError({"code": code, "message": message, "details": None, "hint": None})


@pytest.fixture
def client():
    """Fixture for a mocked Supabase client."""
    return MagicMock()


@pytest.fixture
def query(client):
    """The query builder returned by client.table()."""
    return client.table.return_value


@pytest.mark.asyncio
class TestSupabaseLicenseRepository:
    """Tests for SupabaseLicenseRepository."""

    async def test_lookup_found(self, client, query):
        """Test lookup of an existing record."""
        query.select.return_value.eq.return_value.single.return_value.execute.return_value = (
            MagicMock(data={"email": "a@x.com", "id": 1})
        )
        repository = SupabaseLicenseRepository(client)

        record = await repository.lookup("a@x.com")

        assert record.email == "a@x.com"
        client.table.assert_called_with("licenses")
        query.select.return_value.eq.assert_called_with("email", "a@x.com")

    async def test_lookup_not_found(self, client, query):
        """Test that the no-rows code maps to None."""
        query.select.return_value.eq.return_value.single.return_value.execute.side_effect = (
            api_error(NOT_FOUND_CODE, "JSON object requested, multiple (or no) rows returned")
        )
        repository = SupabaseLicenseRepository(client)

        assert await repository.lookup("nobody@x.com") is None

    async def test_lookup_other_api_error(self, client, query):
        """Test that any other API error becomes LicenseStoreError."""
        query.select.return_value.eq.return_value.single.return_value.execute.side_effect = (
            api_error("42501", "permission denied for table licenses")
        )
        repository = SupabaseLicenseRepository(client)

        with pytest.raises(LicenseStoreError) as exc_info:
            await repository.lookup("a@x.com")

        assert exc_info.value.message == "permission denied for table licenses"

    async def test_lookup_transport_error(self, client, query):
        """Test that transport failures become LicenseStoreError."""
        query.select.return_value.eq.return_value.single.return_value.execute.side_effect = (
            httpx.ConnectError("connection refused")
        )
        repository = SupabaseLicenseRepository(client)

        with pytest.raises(LicenseStoreError) as exc_info:
            await repository.lookup("a@x.com")

        assert "connection refused" in exc_info.value.message

    async def test_table_name(self, client):
        """Test that the configured table name is exposed for startup logging."""
        assert SupabaseLicenseRepository(client, table="entitlements").table == "entitlements"

    async def test_lookup_unexpected_error_keeps_message(self, client, query):
        """Test that an unexpected client failure still carries its message."""
        query.select.return_value.eq.return_value.single.return_value.execute.side_effect = (
            ValueError("malformed response body")
        )
        repository = SupabaseLicenseRepository(client)

        with pytest.raises(LicenseStoreError) as exc_info:
            await repository.lookup("a.com")

        assert exc_info.value.message == "malformed response body"
        assert exc_info.value.to_dict() == {
            "ok": False,
            "error": "Internal error",
            "details": "malformed response body",
        }

    async def test_upsert_on_email_conflict(self, client, query):
        """Test that upsert replaces on the email key."""
        query.upsert.return_value.execute.return_value = MagicMock(data=[{"email": "a@x.com"}])
        repository = SupabaseLicenseRepository(client, table="entitlements")

        record = await repository.upsert("a@x.com")

        assert record.email == "a@x.com"
        client.table.assert_called_with("entitlements")
        query.upsert.assert_called_once_with({"email": "a@x.com"}, on_conflict="email")

    async def test_upsert_failure(self, client, query):
        """Test that upsert failures become LicenseStoreError."""
        query.upsert.return_value.execute.side_effect = api_error("23505", "duplicate key")
        repository = SupabaseLicenseRepository(client)

        with pytest.raises(LicenseStoreError, match="duplicate key"):
            await repository.upsert("a@x.com")

    async def test_delete_by_email(self, client, query):
        """Test that delete filters on the email key."""
        query.delete.return_value.eq.return_value.execute.return_value = MagicMock(data=[])
        repository = SupabaseLicenseRepository(client)

        assert await repository.delete("ghost@x.com") is None
        query.delete.return_value.eq.assert_called_once_with("email", "ghost@x.com")

    async def test_delete_failure(self, client, query):
        """Test that delete failures become LicenseStoreError."""
        query.delete.return_value.eq.return_value.execute.side_effect = httpx.ReadTimeout("timed out")
        repository = SupabaseLicenseRepository(client)

        with pytest.raises(LicenseStoreError):
            await repository.delete("a@x.com")


class TestBuildLicenseRepository:
    """Tests for build_license_repository."""

    @pytest.mark.parametrize("url,key", [("", "key"), ("https://x.supabase.co", ""), (None, None)])
    def test_missing_credentials(self, url, key):
        """Test that missing credentials produce no repository."""
        assert build_license_repository(url, key) is None
