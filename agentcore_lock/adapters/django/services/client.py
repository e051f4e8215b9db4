"""
ZooKeeper client lifecycle: create, start and close kazoo clients, and
ManagedClient which starts once and stops with the application.
"""
import logging
import threading
from typing import Optional

from kazoo.client import KazooClient, KazooState
from kazoo.retry import KazooRetry

from agentcore_lock.adapters.django.conf import ZooKeeperConfig
from agentcore_lock.constants import ClientState

logger = logging.getLogger(__name__)

RETRY_BACKOFF = 2


def _build_retry(config: ZooKeeperConfig) -> KazooRetry:
    return KazooRetry(
        max_tries=config.retry_max_tries,
        delay=config.retry_base_sleep,
        backoff=RETRY_BACKOFF,
        max_delay=config.retry_max_sleep,
    )


class ClientHelper:
    """Create, start and close kazoo clients from a ZooKeeperConfig."""

    def create_client(self, config: ZooKeeperConfig) -> KazooClient:
        """Return a new client; it is not started."""
        logger.debug(
            f"Create ZooKeeper client with bounded exponential backoff "
            f"using configuration: {config}"
        )
        return KazooClient(
            hosts=config.connect_string,
            timeout=config.session_timeout,
            connection_retry=_build_retry(config),
            command_retry=_build_retry(config),
        )

    def start_client(self, config: ZooKeeperConfig) -> KazooClient:
        """
        Create and start a client, waiting up to connection_timeout for
        the connection.
        """
        client = self.create_client(config)
        client.start(timeout=config.connection_timeout)
        return client

    def close_if_started(self, client: KazooClient) -> None:
        """Stop and close client if it is connected or suspended."""
        state = client.state
        if state in (KazooState.CONNECTED, KazooState.SUSPENDED):
            logger.debug(f"Closing ZooKeeper client [{client}]")
            client.stop()
            client.close()
        else:
            logger.debug(
                f"ZooKeeper client [{client}] is not started, so cannot "
                f"stop (state is [{state}])"
            )

    def close_quietly(self, client: Optional[KazooClient]) -> None:
        """Like close_if_started, but None is allowed."""
        if client is None:
            return
        self.close_if_started(client)


class ManagedClient:
    """
    Wraps a kazoo client so the application can start it once and stop it
    on shutdown.
    """

    def __init__(self, client: KazooClient, connection_timeout: float = 15.0):
        if client is None:
            raise ValueError("client must not be None")
        self.client = client
        self.connection_timeout = connection_timeout
        self._state = ClientState.LATENT
        self._state_lock = threading.Lock()

    @property
    def state(self) -> str:
        return self._state

    def start(self) -> None:
        """Start the client unless it was already started."""
        with self._state_lock:
            if self._state != ClientState.LATENT:
                return
            logger.info(
                f"Starting ZooKeeper client {self.client}, currently in "
                f"state {self.client.state}"
            )
            self.client.start(timeout=self.connection_timeout)
            self._state = ClientState.STARTED
        logger.info(
            f"ZooKeeper client {self.client} now in state {self.client.state}"
        )

    def stop(self) -> None:
        """Stop and close the client."""
        logger.info(f"Stopping ZooKeeper client {self.client}")
        with self._state_lock:
            self.client.stop()
            self.client.close()
            self._state = ClientState.STOPPED

    def __repr__(self):
        return (
            f"ManagedClient(state={self._state}, "
            f"client.state={self.client.state}, client={self.client})"
        )
