"""
API tests for the coordination health endpoint, and AppConfig wiring.
"""
from unittest.mock import Mock, patch

import pytest
from django.apps import apps

from agentcore_lock.adapters.django.services import HealthResult


pytestmark = [pytest.mark.api]


BASE_URL = "/api/v1/coordination"
GET_BUNDLE = "agentcore_lock.adapters.django.views.health.get_bundle"


def _bundle_with(result):
    bundle = Mock()
    bundle.health_check.check.return_value = result
    return bundle


class TestHealthEndpoint:
    def test_requires_auth(self, api_client):
        response = api_client.get(BASE_URL + "/health/")
        assert response.status_code == 403

    def test_not_configured_is_unavailable(self, authenticated_client):
        with patch(GET_BUNDLE) as get_bundle:
            get_bundle.return_value.health_check = None
            response = authenticated_client.get(BASE_URL + "/health/")
        assert response.status_code == 503
        data = response.json()
        assert data["healthy"] is False
        assert data["name"] == "zookeeper"
        assert "not configured" in data["message"]

    def test_healthy(self, authenticated_client):
        result = HealthResult.healthy_result("ZooKeeper [ zk ] is healthy")
        with patch(GET_BUNDLE, return_value=_bundle_with(result)):
            response = authenticated_client.get(BASE_URL + "/health/")
        assert response.status_code == 200
        assert response.json() == {
            "name": "zookeeper",
            "healthy": True,
            "message": "ZooKeeper [ zk ] is healthy",
        }

    def test_unhealthy(self, authenticated_client, settings):
        settings.AGENTCORE_LOCK_HEALTH_CHECK_NAME = "zk-main"
        result = HealthResult.unhealthy_result("ZooKeeper [ zk ] is stopped")
        with patch(GET_BUNDLE, return_value=_bundle_with(result)):
            response = authenticated_client.get(BASE_URL + "/health/")
        assert response.status_code == 503
        data = response.json()
        assert data["name"] == "zk-main"
        assert data["message"] == "ZooKeeper [ zk ] is stopped"


class TestAppConfigReady:
    BUNDLE = "agentcore_lock.adapters.django.services.bundle.get_bundle"

    def test_disabled_does_not_run_bundle(self, settings):
        settings.AGENTCORE_LOCK_ZK_ENABLED = False
        with patch(self.BUNDLE) as get_bundle:
            apps.get_app_config("agentcore_lock").ready()
        get_bundle.assert_not_called()

    def test_enabled_runs_bundle_once(self, settings):
        settings.AGENTCORE_LOCK_ZK_ENABLED = True
        settings.AGENTCORE_LOCK_ZK_CONNECT_STRING = "zk-app:2181"
        bundle = Mock(managed_client=None)
        with patch(self.BUNDLE, return_value=bundle), patch(
            "atexit.register"
        ) as register:
            apps.get_app_config("agentcore_lock").ready()
        config = bundle.run.call_args.args[0]
        assert config.connect_string == "zk-app:2181"
        register.assert_called_once_with(bundle.stop)

    def test_enabled_skips_when_already_running(self, settings):
        settings.AGENTCORE_LOCK_ZK_ENABLED = True
        bundle = Mock(managed_client=Mock())
        with patch(self.BUNDLE, return_value=bundle):
            apps.get_app_config("agentcore_lock").ready()
        bundle.run.assert_not_called()
