"""
Lock helper: acquire distributed locks with a timeout, release them quietly,
and run code while holding them.

Timeouts and lock primitive errors are turned into LockAcquisitionException
subclasses, so callers never see kazoo (or cache backend) exceptions raised
during acquisition. No method retries; re-invoke the whole call to retry.

Public API: import from agentcore_lock.adapters.django.
"""
import logging
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Callable, Optional, Tuple

from agentcore_lock.adapters.django.services.zk_locks import (
    LockHandle,
    ZooKeeperMutex,
    ZooKeeperSemaphoreMutex,
)
from agentcore_lock.constants import ErrorType, TimeUnit
from agentcore_lock.exceptions import (
    LockAcquisitionException,
    LockAcquisitionFailureException,
    LockAcquisitionTimeoutException,
)

logger = logging.getLogger(__name__)

_ONE_MICROSECOND = timedelta(microseconds=1)
_NANOS_PER_MICRO = 1_000

ErrorHandler = Callable[[ErrorType, Exception], Any]


def _resolve_timeout(
    timeout, unit: Optional[TimeUnit]
) -> Tuple[Any, TimeUnit]:
    """
    Return (time, unit) for a timedelta or a number plus optional unit.

    A timedelta becomes an exact count of nanoseconds; a bare number is
    seconds. Negative timeouts are rejected, zero means try once.
    """
    if isinstance(timeout, timedelta):
        if unit is not None:
            raise TypeError("unit must not be given with a timedelta timeout")
        time = (timeout // _ONE_MICROSECOND) * _NANOS_PER_MICRO
        unit = TimeUnit.NANOSECONDS
    else:
        time = timeout
        unit = unit or TimeUnit.SECONDS
    if time < 0:
        raise ValueError(f"timeout must not be negative: {time} {unit.name}")
    return time, unit


class LockHelper:
    """
    Stateless helper for creating and using distributed locks.

    Safe to share between threads; lock handles stay owned by the caller.
    """

    def create_mutex(self, client, lock_path: str) -> ZooKeeperMutex:
        """
        Create a re-entrant mutex that only the acquiring thread may
        release.
        """
        return ZooKeeperMutex(client, lock_path)

    def create_semaphore_mutex(
        self, client, lock_path: str
    ) -> ZooKeeperSemaphoreMutex:
        """
        Create a non re-entrant mutex that any thread may release.
        """
        return ZooKeeperSemaphoreMutex(client, lock_path)

    def acquire(self, lock: LockHandle, timeout, unit=None) -> None:
        """
        Acquire lock, waiting up to timeout (timedelta, or number in unit,
        seconds by default).

        Raises:
            LockAcquisitionFailureException: the lock raised while acquiring.
            LockAcquisitionTimeoutException: the timeout expired.
            ValueError: timeout is negative.
        """
        time, unit = _resolve_timeout(timeout, unit)
        try:
            acquired = lock.acquire(time, unit)
        except Exception as exc:
            raise LockAcquisitionFailureException(
                "Failed to acquire lock", exc
            ) from exc

        if not acquired:
            msg = f"Failed to acquire lock; timed out after {time} {unit.name}"
            logger.warning(msg)
            raise LockAcquisitionTimeoutException(msg)

    def release_quietly(self, lock: Optional[LockHandle]) -> None:
        """Release lock, ignoring None and any error from release()."""
        if lock is None:
            return
        try:
            lock.release()
        except Exception:
            logger.warning(f"Unable to release lock {lock!r}", exc_info=True)

    def release_lock_quietly_if_held(
        self, lock: Optional[LockHandle]
    ) -> None:
        """Release lock quietly, but only if this process holds it."""
        if lock is None:
            return
        if lock.is_held_by_current_process():
            logger.debug(f"Releasing lock [{lock!r}]")
            self.release_quietly(lock)
        else:
            logger.debug(
                f"This process does not own lock [{lock!r}]. Nothing to do."
            )

    @contextmanager
    def hold(self, lock: LockHandle, timeout, unit=None):
        """
        Context manager: acquire lock (see acquire), yield it, and release
        it quietly on exit however the block ends. Nothing is released if
        acquisition fails.
        """
        self.acquire(lock, timeout, unit)
        try:
            yield lock
        finally:
            self.release_quietly(lock)

    def _call_locked(
        self,
        lock: LockHandle,
        timeout,
        unit,
        func: Callable[[], Any],
        error_handler: Optional[ErrorHandler],
    ):
        time, unit = _resolve_timeout(timeout, unit)
        if error_handler is None:
            with self.hold(lock, time, unit):
                return func()
        try:
            with self.hold(lock, time, unit):
                return func()
        except LockAcquisitionException as exc:
            return error_handler(ErrorType.LOCK_ACQUISITION, exc)
        except Exception as exc:
            return error_handler(ErrorType.OPERATION, exc)

    def use_lock(
        self,
        lock: LockHandle,
        timeout,
        action: Callable[[], Any],
        error_handler: Optional[Callable[[ErrorType, Exception], None]] = None,
        unit=None,
    ) -> None:
        """
        Acquire lock, run action(), then release the lock.

        Without error_handler, acquisition errors and the action's own
        exception propagate (the latter after release). With error_handler,
        they are passed to error_handler(ErrorType, exc) instead:
        LOCK_ACQUISITION when the lock was not obtained, OPERATION when
        the action raised.
        """
        self._call_locked(lock, timeout, unit, action, error_handler)

    def with_lock(
        self,
        lock: LockHandle,
        timeout,
        supplier: Callable[[], Any],
        error_handler: Optional[ErrorHandler] = None,
        unit=None,
    ):
        """
        Acquire lock, return supplier()'s result, then release the lock.

        Errors are handled as in use_lock; with error_handler, its return
        value becomes the result (it must supply one, None is allowed).
        """
        return self._call_locked(lock, timeout, unit, supplier, error_handler)


lock_helper = LockHelper()
