"""
Core views for liveness, health checks and metrics.
"""

from django.http import HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest


@method_decorator(csrf_exempt, name="dispatch")
class RootView(View):
    """Liveness smoke test."""

    def get(self, _request):
        return JsonResponse({"hello": "world"})


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Health check endpoint."""

    def get(self, _request):
        """Return service health status."""
        return JsonResponse({"ok": True})


class MetricsView(View):
    """Prometheus scrape endpoint."""

    def get(self, _request):
        return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
