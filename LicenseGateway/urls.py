"""
URL configuration for LicenseGateway project.
"""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from core.views import HealthView, MetricsView, RootView

urlpatterns = [
    path("", RootView.as_view(), name="root"),
    # Health check endpoints
    path("health", HealthView.as_view(), name="health"),
    path("metrics", MetricsView.as_view(), name="metrics"),
    # API endpoints
    path("", include("api.v1.validate.urls")),
    path("", include("api.v1.webhook.urls")),
    # OpenAPI Schema
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    # Swagger UI
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
