"""Serializers for agentcore_lock API."""
from rest_framework import serializers


class HealthCheckSerializer(serializers.Serializer):
    """ZooKeeper health check result."""

    name = serializers.CharField()
    healthy = serializers.BooleanField()
    message = serializers.CharField()
