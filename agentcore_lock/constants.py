"""
Constants for lock coordination: error phases, time units, client states.
"""
from enum import Enum


class ErrorType(Enum):
    """Which phase of a locked call failed."""

    # Obtaining the lock failed (timeout or lock primitive error).
    LOCK_ACQUISITION = "LOCK_ACQUISITION"
    # The action or supplier failed while the lock was held.
    OPERATION = "OPERATION"


class TimeUnit(Enum):
    """Time units; each value is the unit's length in nanoseconds."""

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 60 * 60 * 1_000_000_000
    DAYS = 24 * 60 * 60 * 1_000_000_000

    def to_nanos(self, amount):
        return amount * self.value

    def to_seconds(self, amount):
        return amount * self.value / TimeUnit.SECONDS.value


class ClientState:
    """Lifecycle states of a managed ZooKeeper client."""

    LATENT = "LATENT"
    STARTED = "STARTED"
    STOPPED = "STOPPED"

    @classmethod
    def get_all_states(cls):
        return [cls.LATENT, cls.STARTED, cls.STOPPED]
