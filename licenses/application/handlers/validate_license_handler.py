"""
ValidateLicenseHandler.

Handler for the validate query: is this email entitled?
"""

import logging
from typing import Optional

from core.domain.exceptions import EmailRequiredError, StoreNotConfiguredError
from core.metrics import license_validations_total
from licenses.application.dto.license_dto import LicenseAuthorizationDTO
from licenses.application.queries.validate_license import ValidateLicenseQuery
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class ValidateLicenseHandler:
    """Handler for ValidateLicenseQuery."""

    def __init__(self, license_repository: Optional[LicenseRepository]):
        """
        Initialize handler.

        Args:
            license_repository: License store, or None when unconfigured
        """
        self.license_repository = license_repository

    async def handle(self, query: ValidateLicenseQuery) -> LicenseAuthorizationDTO:
        """
        Handle validate license query.

        The store is read only; a record is never created here.

        Args:
            query: ValidateLicenseQuery

        Returns:
            LicenseAuthorizationDTO, authorized iff a record exists

        Raises:
            StoreNotConfiguredError: If the store has no credentials
            EmailRequiredError: If no email was supplied
            LicenseStoreError: If the store lookup fails
        """
        has_store = self.license_repository is not None
        logger.info(
            "New validation request",
            extra={"email": query.email, "has_store": has_store},
        )

        if not has_store:
            error = StoreNotConfiguredError()
            logger.error(error.message)
            license_validations_total.labels(result="misconfigured").inc()
            raise error

        if not query.email:
            license_validations_total.labels(result="invalid").inc()
            raise EmailRequiredError()

        try:
            record = await self.license_repository.lookup(query.email)
        except Exception:
            license_validations_total.labels(result="error").inc()
            logger.error("Error during validation", extra={"email": query.email}, exc_info=True)
            raise

        authorized = record is not None
        license_validations_total.labels(
            result="authorized" if authorized else "unauthorized"
        ).inc()
        return LicenseAuthorizationDTO(authorized=authorized)
