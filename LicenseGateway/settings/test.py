"""
Test settings for LicenseGateway.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

# Store is injected by fixtures
SUPABASE_URL = ""
SUPABASE_SERVICE_ROLE_KEY = ""
LICENSE_TABLE = "licenses"

WEBHOOK_SECRET = "test-webhook-secret"

# Disable logging during tests
LOGGING_CONFIG = None
