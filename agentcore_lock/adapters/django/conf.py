"""
Global config for agentcore_lock (ZooKeeper connection, retry, health).

Every getter reads Django settings with a default. Durations are seconds.
ZooKeeperConfig gathers them for the client helper and the bundle.
"""
import os
from dataclasses import dataclass, replace

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_ZK_ENABLED = True
DEFAULT_ZK_CONNECT_STRING = "localhost:2181"
ZK_CONNECT_STRING_ENV = "ZOOKEEPER_CONNECT_STRING"
DEFAULT_SESSION_TIMEOUT = 60.0
DEFAULT_CONNECTION_TIMEOUT = 15.0
DEFAULT_RETRY_BASE_SLEEP = 0.5
DEFAULT_RETRY_MAX_SLEEP = 10.0
DEFAULT_RETRY_MAX_TRIES = 29
DEFAULT_HEALTH_CHECK_NAME = "zookeeper"
DEFAULT_TASK_LOCK_TIMEOUT = 3600

MIN_RETRY_BASE_SLEEP = 0.001
MIN_RETRY_MAX_SLEEP = 0.01
MIN_RETRY_MAX_TRIES = 1


def get_zk_enabled():
    """Return whether the app starts a ZooKeeper client (default True)."""
    return getattr(settings, "AGENTCORE_LOCK_ZK_ENABLED", DEFAULT_ZK_ENABLED)


def get_zk_connect_string():
    """
    ZooKeeper connect string, e.g. "zk1:2181,zk2:2181/chroot".
    Settings first, then the ZOOKEEPER_CONNECT_STRING env var, else
    localhost:2181.
    """
    explicit = getattr(settings, "AGENTCORE_LOCK_ZK_CONNECT_STRING", None)
    if explicit and str(explicit).strip():
        return str(explicit).strip()
    from_env = os.environ.get(ZK_CONNECT_STRING_ENV, "").strip()
    if from_env:
        return from_env
    return DEFAULT_ZK_CONNECT_STRING


def get_session_timeout():
    """Return ZooKeeper session timeout in seconds (default 60)."""
    return getattr(
        settings,
        "AGENTCORE_LOCK_ZK_SESSION_TIMEOUT",
        DEFAULT_SESSION_TIMEOUT,
    )


def get_connection_timeout():
    """Return seconds to wait for the initial connection (default 15)."""
    return getattr(
        settings,
        "AGENTCORE_LOCK_ZK_CONNECTION_TIMEOUT",
        DEFAULT_CONNECTION_TIMEOUT,
    )


def get_retry_base_sleep():
    return getattr(
        settings,
        "AGENTCORE_LOCK_ZK_RETRY_BASE_SLEEP",
        DEFAULT_RETRY_BASE_SLEEP,
    )


def get_retry_max_sleep():
    return getattr(
        settings,
        "AGENTCORE_LOCK_ZK_RETRY_MAX_SLEEP",
        DEFAULT_RETRY_MAX_SLEEP,
    )


def get_retry_max_tries():
    """Return max tries for the bounded exponential backoff retry."""
    return getattr(
        settings,
        "AGENTCORE_LOCK_ZK_RETRY_MAX_TRIES",
        DEFAULT_RETRY_MAX_TRIES,
    )


def get_health_check_name():
    """Return the name reported by the ZooKeeper health check."""
    return getattr(
        settings,
        "AGENTCORE_LOCK_HEALTH_CHECK_NAME",
        DEFAULT_HEALTH_CHECK_NAME,
    )


def get_task_lock_timeout():
    """Return expiry (seconds) for cache-backed task locks."""
    return getattr(
        settings,
        "AGENTCORE_LOCK_TASK_LOCK_TIMEOUT",
        DEFAULT_TASK_LOCK_TIMEOUT,
    )


@dataclass(frozen=True)
class ZooKeeperConfig:
    """
    Connection and retry settings for one ZooKeeper client. The retry
    policy is bounded exponential backoff: base_sleep doubling per try,
    capped at max_sleep, for at most max_tries tries.
    """

    connect_string: str = DEFAULT_ZK_CONNECT_STRING
    session_timeout: float = DEFAULT_SESSION_TIMEOUT
    connection_timeout: float = DEFAULT_CONNECTION_TIMEOUT
    retry_base_sleep: float = DEFAULT_RETRY_BASE_SLEEP
    retry_max_sleep: float = DEFAULT_RETRY_MAX_SLEEP
    retry_max_tries: int = DEFAULT_RETRY_MAX_TRIES
    health_check_name: str = DEFAULT_HEALTH_CHECK_NAME

    def __post_init__(self):
        if not self.connect_string or not str(self.connect_string).strip():
            raise ImproperlyConfigured(
                "ZooKeeper connect string must not be blank"
            )
        if self.session_timeout <= 0 or self.connection_timeout <= 0:
            raise ImproperlyConfigured(
                "ZooKeeper session and connection timeouts must be > 0"
            )
        if self.retry_base_sleep < MIN_RETRY_BASE_SLEEP:
            raise ImproperlyConfigured(
                f"retry_base_sleep must be >= {MIN_RETRY_BASE_SLEEP}s"
            )
        if self.retry_max_sleep < MIN_RETRY_MAX_SLEEP:
            raise ImproperlyConfigured(
                f"retry_max_sleep must be >= {MIN_RETRY_MAX_SLEEP}s"
            )
        if self.retry_max_tries < MIN_RETRY_MAX_TRIES:
            raise ImproperlyConfigured(
                f"retry_max_tries must be >= {MIN_RETRY_MAX_TRIES}"
            )
        if not self.health_check_name:
            raise ImproperlyConfigured("health_check_name must not be blank")

    @classmethod
    def from_settings(cls):
        """Build config from Django settings (see getters above)."""
        return cls(
            connect_string=get_zk_connect_string(),
            session_timeout=get_session_timeout(),
            connection_timeout=get_connection_timeout(),
            retry_base_sleep=get_retry_base_sleep(),
            retry_max_sleep=get_retry_max_sleep(),
            retry_max_tries=get_retry_max_tries(),
            health_check_name=get_health_check_name(),
        )

    @classmethod
    def copy_of(cls, original):
        """Return a copy of original."""
        if original is None:
            raise ValueError("original config must not be None")
        return replace(original)

    @classmethod
    def copy_of_with_connect_string(cls, original, connect_string: str):
        """Return a copy of original using connect_string instead."""
        if not connect_string or not connect_string.strip():
            raise ValueError("connect_string must not be blank")
        return replace(cls.copy_of(original), connect_string=connect_string)
