"""Django app config for agentcore_lock (ZooKeeper locks)."""
from django.apps import AppConfig


class AgentcoreLockDjangoConfig(AppConfig):
    """App config for agentcore_lock Django adapter."""

    name = "agentcore_lock.adapters.django"
    label = "agentcore_lock"
    verbose_name = "Agentcore Lock"

    def ready(self):
        # NOTE(Ray): Imports inside ready() are intentional, to avoid
        # AppRegistryNotReady while apps are loading.
        import atexit

        from agentcore_lock.adapters.django.conf import (
            ZooKeeperConfig,
            get_zk_enabled,
        )
        from agentcore_lock.adapters.django.services.bundle import get_bundle

        if not get_zk_enabled():
            return
        bundle = get_bundle()
        if bundle.managed_client is not None:
            return
        bundle.run(ZooKeeperConfig.from_settings())
        atexit.register(bundle.stop)
