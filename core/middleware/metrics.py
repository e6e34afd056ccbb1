"""
Metrics middleware for Prometheus.

Records HTTP request metrics for monitoring.
"""

import time
from typing import Callable

from django.http import HttpRequest, HttpResponse

from core.metrics import (
    http_request_duration_seconds,
    http_requests_total,
)


class MetricsMiddleware:
    """
    Middleware to record HTTP metrics for Prometheus.

    Records:
    - Request count by method, endpoint, status
    - Request duration histogram
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process request and record metrics."""
        start_time = time.time()
        status_code = 500

        try:
            response = self.get_response(request)
            status_code = response.status_code
            return response
        finally:
            endpoint = self._endpoint(request)
            http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=status_code,
            ).inc()
            http_request_duration_seconds.labels(
                method=request.method,
                endpoint=endpoint,
            ).observe(time.time() - start_time)

    def _endpoint(self, request: HttpRequest) -> str:
        """Return the matched route pattern instead of the raw path."""
        match = getattr(request, "resolver_match", None)
        if match is not None:
            return "/" + match.route
        return "unmatched"
