"""
Supabase implementation of LicenseRepository port.

This adapter talks to the ``licenses`` table through the
PostgREST query builder exposed by supabase-py.
"""
import logging
from typing import Optional

from asgiref.sync import sync_to_async
from postgrest.exceptions import APIError
from supabase import Client, create_client

from core.domain.exceptions import LicenseStoreError
from licenses.domain.license import LicenseRecord
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

# PostgREST code for a .single() query that matched no rows
NOT_FOUND_CODE = "PGRST116"


class SupabaseLicenseRepository(LicenseRepository):
    """
    Supabase implementation of LicenseRepository.

    This adapter:
    1. Runs the blocking PostgREST calls in a worker thread
    2. Maps the "no rows" signal to None
    3. Wraps every other failure, transport errors included, in LicenseStoreError
    """

    def __init__(self, client: Client, table: str = "licenses"):
        """
        Initialize repository.

        Args:
            client: Configured Supabase client
            table: Name of the license table
        """
        self._client = client
        self._table = table

    @property
    def table(self) -> str:
        """Return the license table name."""
        return self._table

    async def lookup(self, email: str) -> Optional[LicenseRecord]:
        try:
            return await sync_to_async(self._lookup)(email)
        except APIError as e:
            if e.code == NOT_FOUND_CODE:
                return None
            raise self._store_error(e, "lookup") from e
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise self._store_error(e, "lookup") from e

    async def upsert(self, email: str) -> LicenseRecord:
        try:
            return await sync_to_async(self._upsert)(email)
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise self._store_error(e, "upsert") from e

    async def delete(self, email: str) -> None:
        try:
            await sync_to_async(self._delete)(email)
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise self._store_error(e, "delete") from e

    def _lookup(self, email: str) -> Optional[LicenseRecord]:
        response = (
            self._client.table(self._table)
            .select("*")
            .eq("email", email)
            .single()
            .execute()
        )
        if not response.data:
            return None
        return LicenseRecord.from_row(response.data)

    def _upsert(self, email: str) -> LicenseRecord:
        record = LicenseRecord(email=email)
        response = (
            self._client.table(self._table)
            .upsert(record.to_row(), on_conflict="email")
            .execute()
        )
        if response.data:
            return LicenseRecord.from_row(response.data[0])
        return record

    def _delete(self, email: str) -> None:
        self._client.table(self._table).delete().eq("email", email).execute()

    def _store_error(self, exc: Exception, operation: str) -> LicenseStoreError:
        """Build a LicenseStoreError carrying the underlying message."""
        message = getattr(exc, "message", None) or str(exc) or "Unknown error"
        logger.error(
            "License store %s failed",
            operation,
            extra={
                "operation": operation,
                "table": self._table,
                "error": message,
                "error_code": getattr(exc, "code", None),
            },
        )
        return LicenseStoreError(message)


def build_license_repository(
    url: Optional[str], key: Optional[str], table: str = "licenses"
) -> Optional[SupabaseLicenseRepository]:
    """
    Build the Supabase repository from connection settings.

    Args:
        url: Supabase project URL
        key: Service role key
        table: License table name

    Returns:
        SupabaseLicenseRepository, or None when credentials are missing
    """
    if not url or not key:
        return None
    return SupabaseLicenseRepository(create_client(url, key), table=table)
