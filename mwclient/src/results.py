"""
Structured results for connection attempts.

Connecting is the one client operation whose failure the caller must act
on, so it returns a result instead of raising or returning a bare bool.
"""

from dataclasses import dataclass
from typing import Optional, Generic, TypeVar

T = TypeVar('T')

LOGIN_FAILED = "LOGIN_FAILED"
VERSION_MISMATCH = "VERSION_MISMATCH"


@dataclass
class ConnectResult(Generic[T]):
    """
    Outcome of a connection attempt.

    ``error_code`` distinguishes a transport or login failure
    (LOGIN_FAILED) from an incompatible multiworld (VERSION_MISMATCH).
    """
    success: bool
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None
    
    @classmethod
    def success_with_data(cls, data: T, message: str = "Connected") -> 'ConnectResult[T]':
        """Create successful result with data."""
        return cls(success=True, data=data, message=message)
    
    @classmethod
    def failure(cls, message: str, error_code: Optional[str] = None) -> 'ConnectResult[T]':
        """Create failure result with error information."""
        return cls(success=False, data=None, message=message, error_code=error_code)

    def __bool__(self) -> bool:
        return self.success
