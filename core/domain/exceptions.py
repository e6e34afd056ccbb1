"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions. Each exception knows
the JSON body it is reported with at the API boundary.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: Optional[str] = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Return the response body for this error."""
        return {"ok": False, "error": self.message}


class ConfigurationException(DomainException):
    """Base exception for operator misconfiguration."""

    pass


class StoreNotConfiguredError(ConfigurationException):
    """Raised when the license store credentials are missing."""

    def __init__(
        self, message: str = "Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY"
    ):
        super().__init__(message, code="STORE_NOT_CONFIGURED")


class InvalidRequestError(DomainException):
    """Base exception for client input errors."""

    pass


class EmailRequiredError(InvalidRequestError):
    """Raised when a validation request carries no email."""

    def __init__(self, message: str = "Email is required"):
        super().__init__(message, code="EMAIL_REQUIRED")


class MissingWebhookDataError(InvalidRequestError):
    """Raised when a webhook payload has no resolvable email or status."""

    def __init__(self, message: str = "Missing data"):
        super().__init__(message, code="MISSING_DATA")

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class WebhookAuthenticationError(DomainException):
    """Raised when a webhook token is missing or does not match."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class LicenseStoreError(LicenseException):
    """
    Raised when the license store fails for any reason other than
    a missing record.

    The underlying store message is kept for diagnostics.
    """

    def __init__(self, message: str = "Unknown error", code: str = "LICENSE_STORE_ERROR"):
        super().__init__(message, code=code)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "error": "Internal error", "details": self.message}


class LicenseMutationError(LicenseStoreError):
    """Raised when a webhook-driven upsert or delete fails."""

    def __init__(self, message: str = "Unknown error", action: Optional[str] = None):
        super().__init__(message, code="LICENSE_MUTATION_FAILED")
        self.action = action

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "error": self.message}
