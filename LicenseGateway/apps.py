"""
App configuration for License Gateway.
"""

import logging
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class LicenseGatewayConfig(AppConfig):
    """App configuration for LicenseGateway."""

    name = "LicenseGateway"
    verbose_name = "License Gateway"

    def ready(self):
        """Called when Django starts."""
        # Skip for management commands that don't serve requests
        if len(sys.argv) > 1 and sys.argv[1] in ["check", "shell", "spectacular", "test"]:
            return

        # Only setup once
        if not hasattr(self, "_initialized"):
            self.setup_observability()
            self._initialized = True

    def setup_observability(self):
        """Setup observability after apps are ready."""
        from core.instrumentation import setup_opentelemetry

        try:
            setup_opentelemetry()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning(f"Failed to setup OpenTelemetry: {e}")
