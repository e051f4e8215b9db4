"""
Task lock API: cache-backed mutex, check, prevent_duplicate_task decorator.
Re-exported by services/__init__.py; use from agentcore_lock.adapters.django.
"""
from agentcore_lock.adapters.django.services.lock import (
    CacheMutex,
    is_task_locked,
    prevent_duplicate_task,
)

__all__ = [
    "CacheMutex",
    "is_task_locked",
    "prevent_duplicate_task",
]
