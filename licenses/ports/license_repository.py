"""
License repository port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from licenses.domain.license import LicenseRecord


class LicenseRepository(ABC):
    """
    Abstract repository for license records keyed by email.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Store failures other than "not found" raise LicenseStoreError.
    """

    @abstractmethod
    async def lookup(self, email: str) -> Optional[LicenseRecord]:
        """
        Find a license record by exact email.

        Args:
            email: Email key, compared as received

        Returns:
            LicenseRecord or None if not found

        Raises:
            LicenseStoreError: If the store fails
        """
        pass

    @abstractmethod
    async def upsert(self, email: str) -> LicenseRecord:
        """
        Insert or replace the license record for an email.

        Repeated calls with the same email converge to one record.

        Args:
            email: Email key

        Returns:
            Stored LicenseRecord

        Raises:
            LicenseStoreError: If the store fails
        """
        pass

    @abstractmethod
    async def delete(self, email: str) -> None:
        """
        Delete the license record for an email.

        Deleting a missing record is not an error.

        Args:
            email: Email key

        Raises:
            LicenseStoreError: If the store fails
        """
        pass
