"""
Bounded waits on session futures.

The orchestrator is driven from a single update loop, so the few calls
that must block (scouting, hint listing) wait on a Future with an explicit
timeout and report how the wait ended instead of raising.
"""

from concurrent.futures import CancelledError, Future, TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class WaitStatus(Enum):
    COMPLETED = auto()
    TIMED_OUT = auto()
    FAILED = auto()
    CANCELLED = auto()


@dataclass
class BoundedResult(Generic[T]):
    status: WaitStatus
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def completed(self) -> bool:
        return self.status == WaitStatus.COMPLETED

    def value_or(self, default: T) -> T:
        """The value when the wait completed, otherwise ``default``."""
        return self.value if self.completed else default


def wait_bounded(future: "Future[T]", timeout: Optional[float]) -> BoundedResult[T]:
    """
    Block until ``future`` settles or ``timeout`` seconds pass.

    ``timeout=None`` waits for the session's own timeout. The future is not
    cancelled on timeout; a late result is simply dropped.
    """
    try:
        value = future.result(timeout=timeout)
    except FutureTimeoutError:
        return BoundedResult(WaitStatus.TIMED_OUT)
    except CancelledError:
        return BoundedResult(WaitStatus.CANCELLED)
    except Exception as e:
        return BoundedResult(WaitStatus.FAILED, error=e)
    return BoundedResult(WaitStatus.COMPLETED, value=value)
