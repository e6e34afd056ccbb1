"""
Reconciliation DTOs for API responses.
"""
from dataclasses import dataclass
from typing import Any, Dict

from core.domain.value_objects import LicenseAction


@dataclass
class ReconciliationResultDTO:
    """DTO for a handled webhook delivery."""

    action: LicenseAction

    @property
    def ignored(self) -> bool:
        """Return True when the status required no store action."""
        return self.action is LicenseAction.IGNORE

    def to_dict(self) -> Dict[str, Any]:
        """Return the response body."""
        if self.ignored:
            return {"received": True, "ignored": True}
        return {"ok": True, "action": self.action.value}
