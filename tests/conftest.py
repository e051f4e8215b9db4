"""Pytest fixtures for agentcore_lock tests."""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tests.settings")

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
from django.contrib.auth import get_user_model  # noqa: E402
from rest_framework.test import APIClient  # noqa: E402


@pytest.fixture
def user(db):
    User = get_user_model()
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def lock():
    """Lock handle double whose acquire succeeds immediately."""
    handle = Mock(spec=["acquire", "release", "is_held_by_current_process"])
    handle.acquire.return_value = True
    handle.is_held_by_current_process.return_value = True
    return handle


@pytest.fixture
def timed_out_lock(lock):
    lock.acquire.return_value = False
    return lock


@pytest.fixture
def zk_client():
    """kazoo client double handing out Lock and Semaphore recipe doubles."""
    client = Mock()
    client.Lock.return_value.acquire.return_value = True
    client.Semaphore.return_value.acquire.return_value = True
    client.Semaphore.return_value.is_acquired = False
    return client


@pytest.fixture
def clear_cache():
    from django.core.cache import cache

    cache.clear()
    yield cache
    cache.clear()
