"""
Unit tests for webhook domain services.
"""
import logging

import pytest

from core.domain.exceptions import MissingWebhookDataError
from core.domain.value_objects import LicenseAction
from webhooks.domain.payload import RawWebhookPayload
from webhooks.domain.services import (
    ACTIVATE_STATUSES,
    REVOKE_STATUSES,
    EventNormalizer,
    StatusResolver,
    WebhookAuthenticator,
)


class TestWebhookAuthenticator:
    """Tests for WebhookAuthenticator."""

    def test_matching_token(self):
        """Test that the exact secret authenticates."""
        assert WebhookAuthenticator("s3cret").authenticate("s3cret") is True

    def test_mismatched_token(self):
        """Test that a different token is rejected."""
        assert WebhookAuthenticator("s3cret").authenticate("S3CRET") is False

    def test_missing_token(self):
        """Test that a missing token is rejected."""
        assert WebhookAuthenticator("s3cret").authenticate(None) is False
        assert WebhookAuthenticator("s3cret").authenticate("") is False

    @pytest.mark.parametrize("secret", [None, ""])
    def test_unconfigured_secret_rejects_everything(self, secret):
        """Test that no token authenticates without a configured secret."""
        authenticator = WebhookAuthenticator(secret)
        assert authenticator.authenticate("") is False
        assert authenticator.authenticate("anything") is False

    def test_failure_log_never_contains_secret(self, caplog):
        """Test that the warning names the reason but not the secret or token."""
        with caplog.at_level(logging.WARNING, logger="webhooks.domain.services"):
            WebhookAuthenticator("s3cret").authenticate("guess", provider="hotmart")

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.reason == "token_mismatch"
        assert record.provider == "hotmart"
        assert "s3cret" not in caplog.text
        assert "guess" not in caplog.text


class TestEventNormalizer:
    """Tests for EventNormalizer."""

    def test_normalize_nested_customer(self):
        """Test normalization of a customer-style payload."""
        payload = RawWebhookPayload.from_body(
            {"status": "paid", "customer": {"email": "a@x.com"}}
        )

        event = EventNormalizer.normalize(payload)

        assert event.email == "a@x.com"
        assert event.status == "paid"

    def test_normalize_buyer_and_order_status(self):
        """Test normalization of a buyer-style payload."""
        payload = RawWebhookPayload.from_body(
            {"order_status": "refunded", "buyer": {"email": "b@x.com"}}
        )

        event = EventNormalizer.normalize(payload)

        assert event.email == "b@x.com"
        assert event.status == "refunded"

    def test_missing_email(self):
        """Test that a payload without email raises."""
        payload = RawWebhookPayload.from_body({"status": "paid"})
        with pytest.raises(MissingWebhookDataError):
            EventNormalizer.normalize(payload)

    def test_missing_status(self):
        """Test that a payload without status raises."""
        payload = RawWebhookPayload.from_body({"email": "a@x.com"})
        with pytest.raises(MissingWebhookDataError):
            EventNormalizer.normalize(payload)


class TestStatusResolver:
    """Tests for StatusResolver."""

    @pytest.mark.parametrize("status", sorted(ACTIVATE_STATUSES))
    def test_activate_statuses(self, status):
        """Test that paid/approved statuses activate."""
        assert StatusResolver.resolve(status) is LicenseAction.ACTIVATE

    @pytest.mark.parametrize("status", sorted(REVOKE_STATUSES))
    def test_revoke_statuses(self, status):
        """Test that refund/cancellation statuses revoke."""
        assert StatusResolver.resolve(status) is LicenseAction.REVOKE

    @pytest.mark.parametrize("status", ["pending", "waiting_payment", "Paid", " paid", ""])
    def test_other_statuses_ignored(self, status):
        """Test that unknown or variant-cased statuses are ignored."""
        assert StatusResolver.resolve(status) is LicenseAction.IGNORE

    def test_sets_are_disjoint(self):
        """Test that no status both activates and revokes."""
        assert not ACTIVATE_STATUSES & REVOKE_STATUSES
