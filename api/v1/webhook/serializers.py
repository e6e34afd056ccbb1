"""
Serializers for the webhook endpoint.
"""

from rest_framework import serializers


class WebhookAcknowledgementSerializer(serializers.Serializer):
    """Serializer for a handled webhook delivery."""

    ok = serializers.BooleanField(required=False)
    action = serializers.ChoiceField(choices=["activate", "revoke"], required=False)
    received = serializers.BooleanField(required=False)
    ignored = serializers.BooleanField(required=False)


class WebhookErrorSerializer(serializers.Serializer):
    """Serializer for webhook error responses."""

    ok = serializers.BooleanField(required=False)
    error = serializers.CharField()
