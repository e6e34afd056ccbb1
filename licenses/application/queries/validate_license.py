"""
ValidateLicenseQuery.

Query to check whether an email holds a license.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ValidateLicenseQuery:
    """Query to validate a license by email."""

    email: Optional[str]
