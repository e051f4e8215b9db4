from agentcore_lock.adapters.django.views.health import (
    CoordinationHealthAPIView,
)

__all__ = ["CoordinationHealthAPIView"]
