"""URL configuration for agentcore_lock tests."""
from django.urls import include, path

urlpatterns = [
    path(
        "api/v1/coordination/",
        include("agentcore_lock.adapters.django.urls"),
    ),
]
