"""
License DTOs for API responses.
"""
from dataclasses import dataclass


@dataclass
class LicenseAuthorizationDTO:
    """DTO for the validate response."""

    authorized: bool
