"""
URL configuration for the validate endpoint.
"""

from django.urls import path

from api.v1.validate import views

app_name = "validate"

urlpatterns = [
    path(
        "validate",
        views.ValidateLicenseView.as_view(),
        name="validate-license",
    ),
]
