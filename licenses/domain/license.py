"""
License domain entity.

A license record is the persisted fact that an email is entitled.
Presence of the record is the entitlement; no field is inspected.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class LicenseRecord:
    """
    License record keyed by email.

    The email is kept exactly as received. Extra columns the store
    returns are carried in ``attributes`` and ignored by the domain.
    """

    email: str
    attributes: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        """Validate license record."""
        if not self.email:
            raise ValueError("License email is required")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "LicenseRecord":
        """
        Build a record from a store row.

        Args:
            row: Column mapping returned by the store

        Returns:
            LicenseRecord instance
        """
        attributes = {key: value for key, value in row.items() if key != "email"}
        return cls(email=row["email"], attributes=attributes)

    def to_row(self) -> Dict[str, Any]:
        """Return the row written on upsert."""
        return {"email": self.email}
