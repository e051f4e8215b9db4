"""
Health check for the managed ZooKeeper client.

Healthy means: started, connected read/write, and able to list the
children of the root znode.
"""
import logging
from dataclasses import dataclass

from kazoo.protocol.states import KeeperState

from agentcore_lock.constants import ClientState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HealthResult:
    healthy: bool
    message: str

    @classmethod
    def healthy_result(cls, message: str):
        return cls(True, message)

    @classmethod
    def unhealthy_result(cls, message: str):
        return cls(False, message)


class ClientHealthCheck:
    """Check a ManagedClient connected to connect_string."""

    def __init__(self, managed_client, connect_string: str):
        self.managed_client = managed_client
        self.connect_string = connect_string

    def check(self) -> HealthResult:
        cs = self.connect_string
        state = self.managed_client.state
        if state == ClientState.LATENT:
            return HealthResult.unhealthy_result(
                f"ZooKeeper [ {cs} ] has not been started - "
                f"start() has not been called"
            )
        if state == ClientState.STOPPED:
            return HealthResult.unhealthy_result(
                f"ZooKeeper [ {cs} ] is stopped"
            )
        if state != ClientState.STARTED:
            return HealthResult.unhealthy_result(
                f"ZooKeeper [ {cs} ] has unknown state: {state}"
            )

        client = self.managed_client.client
        connected = client.connected
        logger.debug(f"ZooKeeper client is connected? {connected}")
        if not connected:
            return HealthResult.unhealthy_result(
                f"ZooKeeper [ {cs} ] is started but is not connected"
            )

        keeper_state = client.client_state
        logger.debug(f"ZooKeeper keeper state: {keeper_state}")
        if keeper_state == KeeperState.CONNECTED_RO:
            return HealthResult.unhealthy_result(
                f"ZooKeeper [ {cs} ] is connected but is read-only"
            )

        try:
            znodes = client.get_children("/")
        except Exception:
            logger.debug("Error getting root-level znodes", exc_info=True)
            return HealthResult.unhealthy_result(
                f"ZooKeeper [ {cs} ] - unable to read znodes at root path '/'"
            )
        logger.debug(f"Found znodes at root: {znodes}")
        return HealthResult.healthy_result(f"ZooKeeper [ {cs} ] is healthy")
