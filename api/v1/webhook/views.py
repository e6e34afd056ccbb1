"""
Webhook API view.

Payment platforms push order lifecycle events here to activate
or revoke license records.
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.parsing import read_json_object
from api.v1.webhook.serializers import WebhookAcknowledgementSerializer, WebhookErrorSerializer
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.apps import get_license_repository
from webhooks.application.commands.reconcile_license import ReconcileLicenseCommand
from webhooks.application.handlers.reconcile_license_handler import ReconcileLicenseHandler
from webhooks.domain.payload import RawWebhookPayload
from webhooks.domain.providers import DEFAULT_TOKEN_HEADER, resolve_provider
from webhooks.domain.services import WebhookAuthenticator

tracer = get_tracer(__name__)


class LicenseWebhookView(APIView):
    """View for payment-platform webhooks."""

    parser_classes = [JSONParser, FormParser]

    @extend_schema(
        operation_id="license_webhook",
        summary="Payment Webhook",
        description=(
            "Receive an order lifecycle event. Paid/approved statuses activate the "
            "license for the buyer email, refund/cancellation statuses revoke it, "
            "and any other status is acknowledged and ignored."
        ),
        tags=["Webhook API"],
        parameters=[
            OpenApiParameter(
                name=DEFAULT_TOKEN_HEADER,
                type=str,
                location=OpenApiParameter.HEADER,
                required=False,
                description="Shared webhook secret (header name varies by provider)",
            ),
        ],
        request=OpenApiTypes.OBJECT,
        responses={
            200: WebhookAcknowledgementSerializer,
            400: WebhookErrorSerializer,
            401: WebhookErrorSerializer,
            500: WebhookErrorSerializer,
        },
    )
    def post(self, request: Request, provider: str) -> Response:
        """Reconcile a license from a webhook delivery."""
        return async_to_sync(self._handle_webhook)(request, provider)

    async def _handle_webhook(self, request: Request, provider: str) -> Response:
        """Async handler for webhook delivery."""
        with tracer.start_as_current_span("license_webhook") as span:
            span.set_attribute("operation", "license_webhook")
            span.set_attribute("provider", provider)

            webhook_provider = resolve_provider(provider, settings.WEBHOOK_PROVIDERS)
            payload = RawWebhookPayload.from_body(read_json_object(request))
            command = ReconcileLicenseCommand(
                provider=provider,
                token=webhook_provider.extract_token(request.headers, payload),
                payload=payload,
                metrics_label=webhook_provider.metrics_label,
            )

            handler = ReconcileLicenseHandler(
                license_repository=get_license_repository(),
                authenticator=WebhookAuthenticator(settings.WEBHOOK_SECRET),
            )
            try:
                result = await handler.handle(command)
            except Exception as e:
                span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                raise

            span.set_attribute("action", result.action.value)
            span.set_status(Status(StatusCode.OK))
            return Response(result.to_dict(), status=status.HTTP_200_OK)
