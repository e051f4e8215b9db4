# Django adapter: Django app for ZooKeeper-backed distributed locks.
# Public API: import from here (lazy to avoid AppRegistryNotReady).
# Each symbol is loaded from its defining module.

__all__ = [
    "LockHelper",
    "lock_helper",
    "ZooKeeperMutex",
    "ZooKeeperSemaphoreMutex",
    "CacheMutex",
    "is_task_locked",
    "prevent_duplicate_task",
    "ErrorType",
    "TimeUnit",
    "LockAcquisitionException",
    "LockAcquisitionFailureException",
    "LockAcquisitionTimeoutException",
    "ZooKeeperConfig",
    "get_bundle",
]

_BASE = "agentcore_lock.adapters.django"
_SUBMODULES = (
    "apps",
    "conf",
    "serializers",
    "services",
    "urls",
    "views",
)
_SYMBOLS = (
    ("LockHelper", f"{_BASE}.services.lock_helper", "LockHelper"),
    ("lock_helper", f"{_BASE}.services.lock_helper", "lock_helper"),
    ("ZooKeeperMutex", f"{_BASE}.services.zk_locks", "ZooKeeperMutex"),
    ("ZooKeeperSemaphoreMutex", f"{_BASE}.services.zk_locks", "ZooKeeperSemaphoreMutex"),
    ("CacheMutex", f"{_BASE}.services.task_lock", "CacheMutex"),
    ("is_task_locked", f"{_BASE}.services.task_lock", "is_task_locked"),
    ("prevent_duplicate_task", f"{_BASE}.services.task_lock", "prevent_duplicate_task"),
    ("ErrorType", "agentcore_lock.constants", "ErrorType"),
    ("TimeUnit", "agentcore_lock.constants", "TimeUnit"),
    ("LockAcquisitionException", "agentcore_lock.exceptions", "LockAcquisitionException"),
    ("LockAcquisitionFailureException", "agentcore_lock.exceptions", "LockAcquisitionFailureException"),
    ("LockAcquisitionTimeoutException", "agentcore_lock.exceptions", "LockAcquisitionTimeoutException"),
    ("ZooKeeperConfig", f"{_BASE}.conf", "ZooKeeperConfig"),
    ("get_bundle", f"{_BASE}.services.bundle", "get_bundle"),
)
_LAZY = {name: (mod, attr) for name, mod, attr in _SYMBOLS}


def __getattr__(name):
    from importlib import import_module

    if name in _SUBMODULES:
        return import_module(f".{name}", __name__)
    if name in _LAZY:
        mod_path, attr = _LAZY[name]
        mod = import_module(mod_path)
        return getattr(mod, attr)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
