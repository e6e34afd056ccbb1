"""
URL configuration for the webhook endpoint.
"""

from django.urls import path

from api.v1.webhook import views

app_name = "webhook"

urlpatterns = [
    path(
        "webhook/<slug:provider>",
        views.LicenseWebhookView.as_view(),
        name="license-webhook",
    ),
]
