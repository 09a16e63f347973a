"""
Exception hierarchy for contract violations.

Modelled failures travel as Failure values; these exceptions are reserved
for caller bugs and are never caught inside the library.
"""

from typing import List, Optional


class FailureOrError(Exception):
    """Base exception for all FailureOr contract violations."""
    pass


class InvalidStateAccess(FailureOrError):
    """Raised when the value of a failed FailureOr is read."""
    
    def __init__(self, message: str, failures: Optional[List] = None):
        super().__init__(message)
        self.failures = failures or []


class EmptyFailuresError(FailureOrError, ValueError):
    """Raised when a failed FailureOr is built from an empty failure sequence."""
    pass
