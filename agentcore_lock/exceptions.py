"""
Exceptions raised by agentcore_lock.

LockAcquisitionException is the common base for the two ways a lock can
fail to be obtained, so callers can catch either with one clause.
"""
from typing import Optional


class AgentcoreLockError(Exception):
    """
    Base class accepting (), (message), (message, cause) or (cause=...).
    The cause is kept on .cause and chained as __cause__.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        if message is None and cause is not None:
            message = f"{type(cause).__name__}: {cause}"
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class LockAcquisitionException(AgentcoreLockError):
    """Failure to obtain a distributed lock."""


class LockAcquisitionFailureException(LockAcquisitionException):
    """The lock primitive raised while trying to obtain the lock."""


class LockAcquisitionTimeoutException(LockAcquisitionException):
    """The lock could not be obtained within the requested timeout."""


class CoordinatorStartupFailureException(AgentcoreLockError):
    """The managed ZooKeeper client could not be started."""
