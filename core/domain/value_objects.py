"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from enum import Enum


class LicenseAction(Enum):
    """Action a webhook status resolves to."""

    ACTIVATE = "activate"
    REVOKE = "revoke"
    IGNORE = "ignore"

    def __str__(self) -> str:
        """Return action as string."""
        return self.value
