"""
Check whether any ZooKeeper server in a connect string accepts TCP
connections, without creating a ZooKeeper session.
"""
import logging
import socket
from typing import List, Tuple, Union

from agentcore_lock.adapters.django.conf import ZooKeeperConfig

logger = logging.getLogger(__name__)

DEFAULT_ZK_PORT = 2181
DEFAULT_SOCKET_TIMEOUT = 2.0


class SocketChecker:
    """Open (and close) a TCP connection to test reachability."""

    def __init__(self, timeout: float = DEFAULT_SOCKET_TIMEOUT):
        self.timeout = timeout

    def can_connect_via_socket(self, host_and_port: Tuple[str, int]) -> bool:
        host, port = host_and_port
        try:
            with socket.create_connection((host, port), timeout=self.timeout):
                return True
        except OSError as exc:
            logger.debug(f"Cannot connect to {host}:{port}: {exc}")
            return False


def parse_connect_string(connect_string: str) -> List[Tuple[str, int]]:
    """
    Split "host1:2181,host2:2181/chroot" into (host, port) pairs. The
    chroot suffix is dropped and a missing port defaults to 2181.
    """
    hosts_part = connect_string.split("/", 1)[0]
    pairs = []
    for item in hosts_part.split(","):
        item = item.strip()
        if not item:
            continue
        host, sep, port = item.rpartition(":")
        if not sep:
            pairs.append((item, DEFAULT_ZK_PORT))
        else:
            pairs.append((host, int(port)))
    return pairs


class ZooKeeperAvailabilityChecker:
    def __init__(self, socket_checker: SocketChecker = None):
        self.socket_checker = socket_checker or SocketChecker()

    def any_zookeepers_available(
        self, config_or_connect_string: Union[ZooKeeperConfig, str]
    ) -> bool:
        """Return True if any listed ZooKeeper accepts a connection."""
        if isinstance(config_or_connect_string, ZooKeeperConfig):
            connect_string = config_or_connect_string.connect_string
        else:
            connect_string = config_or_connect_string
        return any(
            self.socket_checker.can_connect_via_socket(pair)
            for pair in parse_connect_string(connect_string)
        )
