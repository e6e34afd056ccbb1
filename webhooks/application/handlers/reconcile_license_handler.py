"""
ReconcileLicenseHandler.

Handler applying a payment-platform webhook to the license store.
"""

import logging
from typing import Optional

from core.domain.exceptions import (
    LicenseMutationError,
    LicenseStoreError,
    MissingWebhookDataError,
    StoreNotConfiguredError,
    WebhookAuthenticationError,
)
from core.domain.value_objects import LicenseAction
from core.metrics import webhook_events_total
from licenses.ports.license_repository import LicenseRepository
from webhooks.application.commands.reconcile_license import ReconcileLicenseCommand
from webhooks.application.dto.reconciliation_dto import ReconciliationResultDTO
from webhooks.domain.services import EventNormalizer, StatusResolver, WebhookAuthenticator

logger = logging.getLogger(__name__)


class ReconcileLicenseHandler:
    """Handler for ReconcileLicenseCommand."""

    def __init__(
        self,
        license_repository: Optional[LicenseRepository],
        authenticator: WebhookAuthenticator,
    ):
        """Initialize handler with the license store and authenticator."""
        self.license_repository = license_repository
        self.authenticator = authenticator

    async def handle(self, command: ReconcileLicenseCommand) -> ReconciliationResultDTO:
        """
        Handle reconcile license command.

        Performs at most one store mutation per delivery.

        Args:
            command: ReconcileLicenseCommand

        Returns:
            ReconciliationResultDTO with the action taken

        Raises:
            WebhookAuthenticationError: If the token is missing or wrong
            MissingWebhookDataError: If email or status is unresolved
            StoreNotConfiguredError: If a mutation is needed but the store has no credentials
            LicenseMutationError: If the upsert or delete fails
        """
        provider = command.provider
        label = command.metrics_label

        # Authenticate before touching the payload
        if not self.authenticator.authenticate(command.token, provider=provider):
            webhook_events_total.labels(provider=label, outcome="unauthorized").inc()
            raise WebhookAuthenticationError()

        try:
            event = EventNormalizer.normalize(command.payload)
        except MissingWebhookDataError:
            webhook_events_total.labels(provider=label, outcome="missing_data").inc()
            logger.warning("Webhook payload missing email or status", extra={"provider": provider})
            raise

        action = StatusResolver.resolve(event.status)
        log_extra = {
            "provider": provider,
            "status": event.status,
            "email": event.email,
            "action": action.value,
        }

        if action is LicenseAction.IGNORE:
            webhook_events_total.labels(provider=label, outcome="ignored").inc()
            logger.info("Webhook status ignored", extra=log_extra)
            return ReconciliationResultDTO(action=action)

        if self.license_repository is None:
            error = StoreNotConfiguredError()
            webhook_events_total.labels(provider=label, outcome="misconfigured").inc()
            logger.error(error.message, extra=log_extra)
            raise error

        try:
            if action is LicenseAction.ACTIVATE:
                await self.license_repository.upsert(event.email)
            else:
                await self.license_repository.delete(event.email)
        except LicenseStoreError as e:
            webhook_events_total.labels(provider=label, outcome="error").inc()
            logger.error(
                "Webhook license mutation failed",
                extra={**log_extra, "error": e.message},
            )
            raise LicenseMutationError(e.message, action=action.value) from e

        webhook_events_total.labels(provider=label, outcome=action.value).inc()
        logger.info("Webhook license mutation applied", extra=log_extra)
        return ReconciliationResultDTO(action=action)
