"""
Coordination bundle: wires one managed ZooKeeper client and its health
check into the application. AppConfig.ready() runs the module-level bundle
when AGENTCORE_LOCK_ZK_ENABLED is set.
"""
import logging
from typing import Optional

from agentcore_lock.adapters.django.conf import ZooKeeperConfig
from agentcore_lock.adapters.django.services.client import (
    ClientHelper,
    ManagedClient,
)
from agentcore_lock.adapters.django.services.health import ClientHealthCheck
from agentcore_lock.exceptions import CoordinatorStartupFailureException

logger = logging.getLogger(__name__)


class CoordinationBundle:
    def __init__(self, client_helper: Optional[ClientHelper] = None):
        self.client_helper = client_helper or ClientHelper()
        self.config: Optional[ZooKeeperConfig] = None
        self.managed_client: Optional[ManagedClient] = None
        self.health_check: Optional[ClientHealthCheck] = None

    @property
    def client(self):
        """The underlying kazoo client, or None before run()."""
        if self.managed_client is None:
            return None
        return self.managed_client.client

    def run(self, config: ZooKeeperConfig) -> ManagedClient:
        """
        Create and start the managed client and build its health check.

        Raises:
            CoordinatorStartupFailureException: the client failed to start.
        """
        self.config = config
        client = self.client_helper.create_client(config)
        self.managed_client = ManagedClient(
            client, connection_timeout=config.connection_timeout
        )
        self.health_check = ClientHealthCheck(
            self.managed_client, config.connect_string
        )
        try:
            self.managed_client.start()
        except Exception as exc:
            raise CoordinatorStartupFailureException(
                "Error starting ZooKeeper client", exc
            ) from exc

        logger.info(
            f"Started ZooKeeper client, registered managed client "
            f"[ {self.managed_client} ] and health check with name "
            f"'{config.health_check_name}'"
        )
        return self.managed_client

    def stop(self) -> None:
        """Stop the managed client if run() created one."""
        if self.managed_client is not None:
            self.managed_client.stop()


_bundle = CoordinationBundle()


def get_bundle() -> CoordinationBundle:
    """Return the process-wide bundle used by the Django app."""
    return _bundle
