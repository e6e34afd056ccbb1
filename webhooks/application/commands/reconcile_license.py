"""
ReconcileLicenseCommand.

Command to apply a payment-platform webhook to the license store.
"""

from dataclasses import dataclass
from typing import Optional

from webhooks.domain.payload import RawWebhookPayload
from webhooks.domain.providers import UNREGISTERED_PROVIDER_LABEL


@dataclass
class ReconcileLicenseCommand:
    """Command carrying one webhook delivery."""

    provider: str
    token: Optional[str]
    payload: RawWebhookPayload
    metrics_label: str = UNREGISTERED_PROVIDER_LABEL
