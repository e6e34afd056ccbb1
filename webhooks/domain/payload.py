"""
Webhook payload types.

A raw payload wraps whatever body the payment platform sent.
A normalized event is the canonical (email, status) pair extracted
from it. Nothing past the normalizer reads raw fields.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

FieldPath = Tuple[str, ...]

# Ordered by priority; the first non-empty value wins.
EMAIL_FIELD_CHAIN: Tuple[FieldPath, ...] = (
    ("email",),
    ("buyer", "email"),
    ("customer", "email"),
)

STATUS_FIELD_CHAIN: Tuple[FieldPath, ...] = (
    ("status",),
    ("order_status",),
    ("event",),
)


@dataclass(frozen=True)
class RawWebhookPayload:
    """Untrusted webhook body with explicit optional lookups."""

    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_body(cls, body: Any) -> "RawWebhookPayload":
        """
        Wrap a decoded request body.

        Args:
            body: Decoded JSON body; anything that is not a mapping
                is treated as an empty payload

        Returns:
            RawWebhookPayload instance
        """
        if not isinstance(body, Mapping):
            return cls()
        return cls(fields=dict(body))

    def lookup(self, path: Sequence[str]) -> Optional[str]:
        """
        Return the non-empty string stored at a nested key path.

        Args:
            path: Keys to follow, outermost first

        Returns:
            The string value, or None if any step is missing,
            not a mapping, or the value is not a non-empty string
        """
        current: Any = self.fields
        for key in path:
            if not isinstance(current, Mapping):
                return None
            current = current.get(key)
        if isinstance(current, str) and current:
            return current
        return None

    def first_present(self, chain: Sequence[FieldPath]) -> Optional[str]:
        """Return the first value resolved by a fallback chain."""
        for path in chain:
            value = self.lookup(path)
            if value is not None:
                return value
        return None


@dataclass(frozen=True)
class NormalizedEvent:
    """Canonical webhook event."""

    email: str
    status: str
