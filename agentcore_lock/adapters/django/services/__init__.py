"""
Services: lock helper, lock handles, task lock, ZooKeeper client lifecycle,
health check, listeners, availability.
Import from here or from agentcore_lock.adapters.django.

- Locks: LockHelper, lock_helper, ZooKeeperMutex, ZooKeeperSemaphoreMutex,
  CacheMutex, LockHandle
- Task lock: is_task_locked, prevent_duplicate_task
- Client: ClientHelper, ManagedClient, CoordinationBundle, get_bundle
- Health: ClientHealthCheck, HealthResult
- Listeners: add_logging_connection_state_listener, logging_watcher,
  describe_event
- Availability: ZooKeeperAvailabilityChecker, SocketChecker
"""
from agentcore_lock.adapters.django.services.availability import (
    SocketChecker,
    ZooKeeperAvailabilityChecker,
)
from agentcore_lock.adapters.django.services.bundle import (
    CoordinationBundle,
    get_bundle,
)
from agentcore_lock.adapters.django.services.client import (
    ClientHelper,
    ManagedClient,
)
from agentcore_lock.adapters.django.services.health import (
    ClientHealthCheck,
    HealthResult,
)
from agentcore_lock.adapters.django.services.listeners import (
    add_logging_connection_state_listener,
    describe_event,
    logging_watcher,
)
from agentcore_lock.adapters.django.services.lock_helper import (
    LockHelper,
    lock_helper,
)
from agentcore_lock.adapters.django.services.task_lock import (
    CacheMutex,
    is_task_locked,
    prevent_duplicate_task,
)
from agentcore_lock.adapters.django.services.zk_locks import (
    LockHandle,
    ZooKeeperMutex,
    ZooKeeperSemaphoreMutex,
)
from agentcore_lock.constants import ErrorType, TimeUnit

__all__ = [
    "LockHelper",
    "lock_helper",
    "LockHandle",
    "ZooKeeperMutex",
    "ZooKeeperSemaphoreMutex",
    "CacheMutex",
    "is_task_locked",
    "prevent_duplicate_task",
    "ClientHelper",
    "ManagedClient",
    "CoordinationBundle",
    "get_bundle",
    "ClientHealthCheck",
    "HealthResult",
    "add_logging_connection_state_listener",
    "describe_event",
    "logging_watcher",
    "SocketChecker",
    "ZooKeeperAvailabilityChecker",
    "ErrorType",
    "TimeUnit",
]
