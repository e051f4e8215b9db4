"""
agentcore_lock: timeout-bounded distributed locks on ZooKeeper.
Django integration lives in agentcore_lock.adapters.django.
"""
