"""
Webhook provider definitions.

Each payment platform presents its shared token in its own header
or body field.
"""
from dataclasses import dataclass
from typing import Mapping, Optional

from webhooks.domain.payload import RawWebhookPayload

DEFAULT_TOKEN_HEADER = "X-Webhook-Token"
DEFAULT_TOKEN_FIELD = "token"

# Metrics label shared by every unregistered slug
UNREGISTERED_PROVIDER_LABEL = "other"


@dataclass(frozen=True)
class WebhookProvider:
    """Where a provider puts its token."""

    name: str
    token_header: str = DEFAULT_TOKEN_HEADER
    token_field: str = DEFAULT_TOKEN_FIELD
    registered: bool = False

    @property
    def metrics_label(self) -> str:
        """Label for metrics; unregistered slugs collapse to one value."""
        return self.name if self.registered else UNREGISTERED_PROVIDER_LABEL

    def extract_token(
        self, headers: Mapping[str, str], payload: RawWebhookPayload
    ) -> Optional[str]:
        """
        Read the presented token, header first then body field.

        Args:
            headers: Case-insensitive request headers
            payload: Raw webhook payload

        Returns:
            Token string, or None if neither location has one
        """
        token = headers.get(self.token_header)
        if token:
            return token
        return payload.lookup((self.token_field,))


def resolve_provider(name: str, registry: Mapping[str, Mapping[str, str]]) -> WebhookProvider:
    """
    Build the provider definition for a slug.

    Unknown slugs fall back to the default header and field.

    Args:
        name: Provider slug from the URL
        registry: Settings mapping of slug to token_header/token_field

    Returns:
        WebhookProvider
    """
    config = registry.get(name) or {}
    return WebhookProvider(
        name=name,
        registered=name in registry,
        token_header=config.get("token_header", DEFAULT_TOKEN_HEADER),
        token_field=config.get("token_field", DEFAULT_TOKEN_FIELD),
    )
