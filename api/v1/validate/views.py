"""
Validate API view.

Used by the product to check whether an email is entitled.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.parsing import read_json_object
from api.v1.validate.serializers import (
    ErrorResponseSerializer,
    ValidateLicenseRequestSerializer,
    ValidateLicenseResponseSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.application.handlers.validate_license_handler import ValidateLicenseHandler
from licenses.application.queries.validate_license import ValidateLicenseQuery
from licenses.apps import get_license_repository

tracer = get_tracer(__name__)


class ValidateLicenseView(APIView):
    """View for validating a license by email."""

    @extend_schema(
        operation_id="validate_license",
        summary="Validate License",
        description=(
            "Check whether an email holds a license. "
            "Authorization is a presence check on the license store."
        ),
        tags=["License API"],
        request=ValidateLicenseRequestSerializer,
        responses={
            200: ValidateLicenseResponseSerializer,
            400: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
        },
    )
    def post(self, request: Request) -> Response:
        """Validate a license for an email."""
        return async_to_sync(self._handle_validate_license)(request)

    async def _handle_validate_license(self, request: Request) -> Response:
        """Async handler for validate license."""
        with tracer.start_as_current_span("validate_license") as span:
            span.set_attribute("operation", "validate_license")

            serializer = ValidateLicenseRequestSerializer(data=read_json_object(request))
            email = serializer.validated_data.get("email") if serializer.is_valid() else None

            handler = ValidateLicenseHandler(license_repository=get_license_repository())
            try:
                result = await handler.handle(ValidateLicenseQuery(email=email))
            except Exception as e:
                span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                raise

            span.set_attribute("authorized", result.authorized)
            span.set_status(Status(StatusCode.OK))

            response_serializer = ValidateLicenseResponseSerializer(result)
            return Response(response_serializer.data, status=status.HTTP_200_OK)
