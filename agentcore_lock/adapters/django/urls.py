"""
URL configuration for agentcore_lock API.

Include under a coordination prefix, e.g.:
    path('api/v1/coordination/', include(
        'agentcore_lock.adapters.django.urls')),
"""
from django.urls import path

from agentcore_lock.adapters.django.views import CoordinationHealthAPIView

urlpatterns = [
    path("health/", CoordinationHealthAPIView.as_view(), name="lock-health"),
]
