"""
Serializers for the validate endpoint.
"""

from rest_framework import serializers


class ValidateLicenseRequestSerializer(serializers.Serializer):
    """Serializer for validate request."""

    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)


class ValidateLicenseResponseSerializer(serializers.Serializer):
    """Serializer for validate response."""

    authorized = serializers.BooleanField()


class ErrorResponseSerializer(serializers.Serializer):
    """Serializer for error responses."""

    ok = serializers.BooleanField(required=False)
    error = serializers.CharField()
    details = serializers.CharField(required=False)
