"""
Logging listeners for kazoo clients: connection state changes and watch
events are written to this module's logger at INFO.
"""
import logging

from kazoo.client import KazooState

logger = logging.getLogger(__name__)


def add_logging_connection_state_listener(client, name: str):
    """
    Add a listener to client that logs each connection state change.
    Returns the listener so callers can remove it later.
    """
    def listener(state):
        logger.info(
            f"{name} received new connection state: {state} "
            f"(connected? {state == KazooState.CONNECTED})"
        )

    client.add_listener(listener)
    return listener


def describe_event(event) -> str:
    """Human-readable description of a kazoo WatchedEvent."""
    return (
        f"WatchedEvent(type={getattr(event, 'type', None)}, "
        f"state={getattr(event, 'state', None)}, "
        f"path={getattr(event, 'path', None)})"
    )


def logging_watcher(name: str):
    """
    Return a watch function (for get_children/get/exists watch=...) that
    logs the event it receives.
    """
    def watcher(event):
        logger.info(
            f"{name} received ZooKeeper event: {describe_event(event)}"
        )

    return watcher
