"""
App configuration for the licenses module.
"""

import logging
from typing import Optional

from django.apps import AppConfig, apps
from django.conf import settings

from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)


class LicensesConfig(AppConfig):
    """
    App configuration for licenses.

    Owns the single license store client for the process. It is built
    once in ready() and handed to handlers by the views.
    """

    name = "licenses"
    verbose_name = "Licenses"

    license_repository: Optional[LicenseRepository] = None

    def ready(self):
        """Build the license store client once apps are loaded."""
        from licenses.infrastructure.repositories.supabase_license_repository import (
            build_license_repository,
        )

        try:
            self.license_repository = build_license_repository(
                settings.SUPABASE_URL,
                settings.SUPABASE_SERVICE_ROLE_KEY,
                table=settings.LICENSE_TABLE,
            )
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Invalid credentials are reported per request as a configuration error
            logger.error(f"Failed to create license store client: {e}", exc_info=True)
            self.license_repository = None

        if self.license_repository is None:
            logger.warning(
                "License store is not configured",
                extra={"has_url": bool(settings.SUPABASE_URL), "table": settings.LICENSE_TABLE},
            )
        else:
            logger.info(
                "License store configured",
                extra={"table": self.license_repository.table},
            )


def get_license_repository() -> Optional[LicenseRepository]:
    """Return the process-wide license store client, or None if unconfigured."""
    return apps.get_app_config("licenses").license_repository
