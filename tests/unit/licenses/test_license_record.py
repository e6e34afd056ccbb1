"""
Unit tests for the LicenseRecord entity.
"""
import pytest

from licenses.domain.license import LicenseRecord


class TestLicenseRecord:
    """Tests for LicenseRecord."""

    def test_from_row_keeps_extra_columns(self):
        """Test that extra store columns are carried but not compared."""
        record = LicenseRecord.from_row({"email": "a@x.com", "id": 7, "created_at": "2024-01-01"})

        assert record.email == "a@x.com"
        assert record.attributes == {"id": 7, "created_at": "2024-01-01"}
        assert record == LicenseRecord(email="a@x.com")

    def test_to_row(self):
        """Test the row written on upsert."""
        assert LicenseRecord(email="a@x.com").to_row() == {"email": "a@x.com"}

    def test_email_required(self):
        """Test that an empty email is rejected."""
        with pytest.raises(ValueError, match="email is required"):
            LicenseRecord(email="")
