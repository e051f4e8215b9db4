"""
Task lock: prevent duplicate task execution using the Django cache.

CacheMutex is a LockHandle whose atomic test-and-set is cache.add, so it
works across processes sharing a cache backend (Redis, Memcached). It is
not re-entrant and any thread may release it.

Public API: import from agentcore_lock.adapters.django.
"""
import hashlib
import logging
import uuid
from time import monotonic, sleep
from typing import Optional

from django.core.cache import cache

from agentcore_lock.adapters.django.conf import get_task_lock_timeout
from agentcore_lock.adapters.django.services.lock_helper import lock_helper
from agentcore_lock.constants import ErrorType, TimeUnit
from agentcore_lock.exceptions import LockAcquisitionTimeoutException

logger = logging.getLogger(__name__)

LOCK_KEY_PREFIX = "agentcore_lock_task_lock"
DEFAULT_POLL_INTERVAL = 0.1


def _lock_key(lock_name: str) -> str:
    return f"{LOCK_KEY_PREFIX}:{lock_name}"


class CacheMutex:
    """Mutex stored as a cache key holding a random owner token."""

    def __init__(
        self,
        lock_name: str,
        expire_seconds: Optional[int] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self.lock_name = lock_name
        self.lock_key = _lock_key(lock_name)
        self.expire_seconds = expire_seconds or get_task_lock_timeout()
        self.poll_interval = poll_interval
        self._token = None

    def acquire(self, time, unit: TimeUnit) -> bool:
        deadline = monotonic() + unit.to_seconds(time)
        while True:
            token = uuid.uuid4().hex
            if cache.add(self.lock_key, token, timeout=self.expire_seconds):
                self._token = token
                logger.info(f"Acquired task lock lock_name={self.lock_name}")
                return True
            remaining = deadline - monotonic()
            if remaining <= 0:
                logger.debug(
                    f"Task lock already exists lock_name={self.lock_name}"
                )
                return False
            sleep(min(self.poll_interval, remaining))

    def release(self) -> None:
        """
        Delete the key if it still holds this owner's token.

        The cache API has no compare-and-delete, so the check and delete are
        two steps; expiry (expire_seconds) is the only guard against the key
        expiring and being taken by another owner between them. Keep
        expire_seconds well above the longest expected hold.
        """
        if self._token is None or cache.get(self.lock_key) != self._token:
            raise RuntimeError(
                f"Task lock not held lock_name={self.lock_name}"
            )
        cache.delete(self.lock_key)
        self._token = None
        logger.info(f"Released task lock lock_name={self.lock_name}")

    def is_held_by_current_process(self) -> bool:
        return (
            self._token is not None
            and cache.get(self.lock_key) == self._token
        )

    def __repr__(self):
        return f"CacheMutex(lock_name={self.lock_name!r})"


def is_task_locked(lock_name: str):
    """Return True if the given task lock is currently held, else False."""
    try:
        return cache.get(_lock_key(lock_name)) is not None
    except Exception as exc:
        logger.error(
            f"Failed to check task lock lock_name={lock_name}: {exc}"
        )
        return False


def _extract_lock_param_value(args, kwargs, lock_param):
    param_value = kwargs.get(lock_param)
    if not param_value and args:
        # Bound Celery tasks receive the task instance (with .request) first
        if hasattr(args[0], "request"):
            param_value = args[1] if len(args) > 1 else None
        else:
            param_value = args[0]
    return param_value


def _build_task_lock_name(lock_name, param_value):
    if not param_value:
        return lock_name
    param_str = str(param_value)
    if len(param_str) > 200:
        h = hashlib.md5(param_str.encode("utf-8")).hexdigest()[:16]
        return f"{lock_name}_{h}"
    return f"{lock_name}_{param_value}"


def _skipped(reason: str, error: str):
    return {
        "success": False,
        "status": "skipped",
        "reason": reason,
        "error": error,
    }


def prevent_duplicate_task(
    lock_name: str,
    timeout: Optional[int] = None,
    lock_param: Optional[str] = None,
):
    """
    Decorator to prevent duplicate task execution: tries the cache lock once
    before the run and releases it after. Returns a skip payload if the lock
    is held elsewhere or cannot be obtained. Every exception raised by the
    task itself propagates, lock exceptions from locks it takes included.

    timeout is the lock expiry in seconds, guarding against a worker that
    dies while holding it.
    """
    def decorator(func):
        def wrapper(*args, **kwargs):
            task_lock_name = lock_name
            if lock_param:
                pv = _extract_lock_param_value(args, kwargs, lock_param)
                if pv is not None:
                    task_lock_name = _build_task_lock_name(lock_name, pv)
                else:
                    logger.warning(
                        f"Could not extract lock_param={lock_param}, "
                        f"using lock_name={lock_name}"
                    )

            started = False

            def run():
                nonlocal started
                started = True
                return func(*args, **kwargs)

            def on_error(error_type, exc):
                # Anything raised once the task started is the task's own
                # error, including a lock exception from a nested lock.
                if error_type is ErrorType.OPERATION or started:
                    raise exc
                if isinstance(exc, LockAcquisitionTimeoutException):
                    return _skipped(
                        "task_already_running",
                        f"Task {task_lock_name} is already running",
                    )
                logger.error(
                    f"Failed to acquire task lock "
                    f"lock_name={task_lock_name}: {exc}"
                )
                return _skipped(
                    "lock_acquisition_failed",
                    f"Failed to acquire lock for {task_lock_name}",
                )

            mutex = CacheMutex(task_lock_name, expire_seconds=timeout)
            return lock_helper.with_lock(mutex, 0, run, on_error)
        wrapper.__name__ = func.__name__
        wrapper.__module__ = func.__module__
        wrapper.__doc__ = func.__doc__
        return wrapper
    return decorator
