"""API view for the ZooKeeper client health check."""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from agentcore_lock.adapters.django.conf import get_health_check_name
from agentcore_lock.adapters.django.serializers import HealthCheckSerializer
from agentcore_lock.adapters.django.services.bundle import get_bundle


class CoordinationHealthAPIView(APIView):
    """GET health of the managed ZooKeeper client (200 healthy, 503 not)."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["lock-management"],
        summary="ZooKeeper health",
        description=(
            "Return whether the ZooKeeper client is started, connected "
            "read/write and able to read the root znode."
        ),
        responses={200: HealthCheckSerializer, 503: HealthCheckSerializer},
    )
    def get(self, request: Request) -> Response:
        health_check = get_bundle().health_check
        if health_check is None:
            data = {
                "name": get_health_check_name(),
                "healthy": False,
                "message": "ZooKeeper client is not configured",
            }
        else:
            result = health_check.check()
            data = {
                "name": get_health_check_name(),
                "healthy": result.healthy,
                "message": result.message,
            }
        code = (
            status.HTTP_200_OK
            if data["healthy"]
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return Response(HealthCheckSerializer(data).data, status=code)
