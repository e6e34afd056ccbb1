"""
Webhook domain services.

Authentication, normalization and status classification for
payment-platform webhooks.
"""
import hmac
import logging
from typing import FrozenSet, Optional

from core.domain.exceptions import MissingWebhookDataError
from core.domain.value_objects import LicenseAction
from webhooks.domain.payload import (
    EMAIL_FIELD_CHAIN,
    STATUS_FIELD_CHAIN,
    NormalizedEvent,
    RawWebhookPayload,
)

logger = logging.getLogger(__name__)

# Payment-platform vocabulary, matched exactly (no case folding or trimming)
ACTIVATE_STATUSES: FrozenSet[str] = frozenset(
    {
        "paid",
        "approved",
        "completed",
        "order_approved",
        "purchase_approved",
        "PURCHASE_APPROVED",
        "PURCHASE_COMPLETE",
    }
)

REVOKE_STATUSES: FrozenSet[str] = frozenset(
    {
        "refunded",
        "chargeback",
        "canceled",
        "cancelled",
        "order_refunded",
        "subscription_canceled",
        "PURCHASE_REFUNDED",
        "PURCHASE_CHARGEBACK",
        "PURCHASE_CANCELED",
        "PURCHASE_PROTEST",
    }
)


class WebhookAuthenticator:
    """Domain service for shared-secret webhook authentication."""

    def __init__(self, secret: Optional[str]):
        """
        Initialize authenticator.

        Args:
            secret: Configured shared secret, or None if unset
        """
        self._secret = secret or None

    def authenticate(self, token: Optional[str], provider: Optional[str] = None) -> bool:
        """
        Check a received token against the configured secret.

        Args:
            token: Token presented by the sender
            provider: Provider slug, used for logging only

        Returns:
            True iff a secret is configured and the token equals it
        """
        if self._secret is None:
            reason = "secret_not_configured"
        elif not token:
            reason = "token_missing"
        elif hmac.compare_digest(token.encode(), self._secret.encode()):
            return True
        else:
            reason = "token_mismatch"

        logger.warning(
            "Webhook authentication failed",
            extra={"provider": provider, "reason": reason},
        )
        return False


class EventNormalizer:
    """Domain service extracting the canonical event from a raw payload."""

    @staticmethod
    def normalize(payload: RawWebhookPayload) -> NormalizedEvent:
        """
        Resolve email and status through their fallback chains.

        Args:
            payload: Raw webhook payload

        Returns:
            NormalizedEvent

        Raises:
            MissingWebhookDataError: If email or status is unresolved
        """
        email = payload.first_present(EMAIL_FIELD_CHAIN)
        status = payload.first_present(STATUS_FIELD_CHAIN)
        if email is None or status is None:
            raise MissingWebhookDataError()
        return NormalizedEvent(email=email, status=status)


class StatusResolver:
    """Domain service mapping a status string to a license action."""

    @staticmethod
    def resolve(status: str) -> LicenseAction:
        """
        Classify a status.

        Args:
            status: Normalized status string

        Returns:
            ACTIVATE, REVOKE, or IGNORE when the status is in neither set
        """
        if status in ACTIVATE_STATUSES:
            return LicenseAction.ACTIVATE
        if status in REVOKE_STATUSES:
            return LicenseAction.REVOKE
        return LicenseAction.IGNORE
