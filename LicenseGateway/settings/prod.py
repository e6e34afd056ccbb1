"""
Production settings for LicenseGateway.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "").split(",")

# Security settings
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

# Secret key from environment
SECRET_KEY = os.environ.get("SECRET_KEY", SECRET_KEY)  # noqa: F405
