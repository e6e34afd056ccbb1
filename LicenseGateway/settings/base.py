"""
Base Django settings for LicenseGateway.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from LicenseGateway.settings.logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

load_dotenv(BASE_DIR / ".env")

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get("SECRET_KEY", "django-insecure-license-gateway-dev-key")

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "LicenseGateway.apps.LicenseGatewayConfig",
    "core",
    "licenses.apps.LicensesConfig",
    "webhooks",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    # Custom middleware
    "core.middleware.observability.ObservabilityMiddleware",
    "core.middleware.metrics.MetricsMiddleware",
]

ROOT_URLCONF = "LicenseGateway.urls"

WSGI_APPLICATION = "LicenseGateway.wsgi.application"

# Routes are declared without trailing slashes
APPEND_SLASH = False

# The license store is Supabase; Django itself keeps no database
DATABASES = {}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "License Gateway API",
    "DESCRIPTION": (
        "License authorization gateway. Validates emails against the license "
        "store and keeps it in sync with payment-platform webhooks."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "TAGS": [
        {"name": "License API", "description": "Product-facing license validation"},
        {"name": "Webhook API", "description": "Payment-platform license reconciliation"},
    ],
}

# License store (Supabase)
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY") or os.environ.get(
    "SUPABASE_SERVICE_KEY", ""
)
LICENSE_TABLE = os.environ.get("LICENSE_TABLE", "licenses")

# Webhooks
WEBHOOK_SECRET = os.environ.get("WEBHOOK_SECRET", "")

# Provider slug -> where the shared token is sent.
# Unknown providers use X-Webhook-Token / "token".
WEBHOOK_PROVIDERS = {
    "hotmart": {"token_header": "X-Hotmart-Hottok", "token_field": "hottok"},
}

# Observability
LOGGING = get_logging_config(ENVIRONMENT)
