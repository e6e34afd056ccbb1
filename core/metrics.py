"""
Prometheus metrics for the license gateway.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# License metrics
license_validations_total = Counter(
    "license_validations_total",
    "Total license validation requests",
    ["result"],
)

webhook_events_total = Counter(
    "webhook_events_total",
    "Total webhook deliveries by outcome",
    ["provider", "outcome"],
)
