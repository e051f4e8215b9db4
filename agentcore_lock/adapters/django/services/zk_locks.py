"""
Lock handles: the LockHandle protocol consumed by LockHelper and the two
ZooKeeper-backed variants built on kazoo recipes.

- ZooKeeperMutex: re-entrant, only the acquiring thread may release.
- ZooKeeperSemaphoreMutex: not re-entrant, any thread may release.
"""
import logging
import threading
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from kazoo.exceptions import LockTimeout

from agentcore_lock.constants import TimeUnit

logger = logging.getLogger(__name__)


@runtime_checkable
class LockHandle(Protocol):
    def acquire(self, time, unit: TimeUnit) -> bool:
        """
        Try to obtain the lock, waiting up to time/unit. Zero means try
        once without waiting. Returns True if obtained, False on timeout.
        May raise if the underlying coordination client fails.
        """
        ...

    def release(self) -> None:
        """Release the lock. May raise if it is not held."""
        ...

    def is_held_by_current_process(self) -> bool:
        """Return True if this process currently holds the lock."""
        ...


def _wait_kwargs(time, unit: TimeUnit) -> Dict[str, Any]:
    """Translate time/unit into kazoo's blocking/timeout arguments."""
    seconds = unit.to_seconds(time)
    if seconds <= 0:
        return {"blocking": False}
    return {"blocking": True, "timeout": seconds}


class ZooKeeperMutex:
    """
    Re-entrant mutex on a ZooKeeper path (kazoo Lock recipe).

    The owning thread may acquire again without blocking; each acquire must
    be matched by a release, and the znode is removed on the last one.
    Releasing from any other thread raises RuntimeError.
    kazoo signals an expired wait by raising LockTimeout; that is reported
    as False like any other timeout.
    """

    def __init__(self, client, lock_path: str,
                 identifier: Optional[str] = None):
        self.lock_path = lock_path
        self._lock = client.Lock(lock_path, identifier)
        self._guard = threading.Lock()
        self._owner = None
        self._hold_count = 0

    def acquire(self, time, unit: TimeUnit) -> bool:
        me = threading.get_ident()
        with self._guard:
            if self._owner == me:
                self._hold_count += 1
                return True
        try:
            acquired = self._lock.acquire(**_wait_kwargs(time, unit))
        except LockTimeout:
            logger.debug(f"Timed out waiting for lock_path={self.lock_path}")
            return False
        if acquired:
            with self._guard:
                self._owner = me
                self._hold_count = 1
        return acquired

    def release(self) -> None:
        with self._guard:
            if self._owner != threading.get_ident():
                raise RuntimeError(
                    f"Current thread does not own lock {self.lock_path}"
                )
            self._hold_count -= 1
            if self._hold_count > 0:
                return
            self._owner = None
        self._lock.release()

    def is_held_by_current_process(self) -> bool:
        return self._hold_count > 0

    def __repr__(self):
        return (
            f"ZooKeeperMutex(lock_path={self.lock_path!r}, "
            f"hold_count={self._hold_count})"
        )


class ZooKeeperSemaphoreMutex:
    """
    Non re-entrant mutex on a ZooKeeper path (kazoo Semaphore recipe with a
    single lease). A second acquire while held returns False; any thread in
    the process may release.
    A kazoo LockTimeout is reported as False.
    """

    def __init__(self, client, lock_path: str,
                 identifier: Optional[str] = None):
        self.lock_path = lock_path
        self._semaphore = client.Semaphore(
            lock_path, identifier, max_leases=1
        )

    def acquire(self, time, unit: TimeUnit) -> bool:
        if self._semaphore.is_acquired:
            logger.debug(
                f"Semaphore mutex already held, not re-entrant "
                f"lock_path={self.lock_path}"
            )
            return False
        try:
            return self._semaphore.acquire(**_wait_kwargs(time, unit))
        except LockTimeout:
            logger.debug(f"Timed out waiting for lock_path={self.lock_path}")
            return False

    def release(self) -> None:
        if not self._semaphore.is_acquired:
            raise RuntimeError(f"Lock {self.lock_path} is not acquired")
        self._semaphore.release()

    def is_held_by_current_process(self) -> bool:
        return bool(self._semaphore.is_acquired)

    def __repr__(self):
        return f"ZooKeeperSemaphoreMutex(lock_path={self.lock_path!r})"
