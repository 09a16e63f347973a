"""
Factory functions for FailureOr.

ok() and fail() are the entry points callers use to build results.
"""

from typing import Any, Iterable, TypeVar, Union

from .exceptions import EmptyFailuresError
from .failure import Failure
from .failure_or import FailureOr
from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


def ok(value: T = None) -> FailureOr[T]:
    """
    Wrap a value in a successful FailureOr.
    
    Args:
        value: Value to wrap; None stands for "no value"
        
    Returns:
        Success holding value
    """
    return FailureOr.from_value(value)


def fail(failure: Union[Failure, Iterable[Failure]]) -> FailureOr[Any]:
    """
    Build a failed FailureOr from one failure or a sequence of failures.
    
    Args:
        failure: A Failure, or a non-empty iterable of Failure
        
    Returns:
        Failed holding the failures in order. Its failures property is
        always a list, so fail((a, b)).failures == [a, b].
        
    Raises:
        EmptyFailuresError: If an empty sequence is given
        TypeError: If the argument is neither a Failure nor an iterable of them
    """
    if isinstance(failure, Failure):
        return FailureOr.from_failure(failure)
    
    if isinstance(failure, (str, bytes)) or not isinstance(failure, Iterable):
        raise TypeError(
            f"fail() expects a Failure or a sequence of Failure, got {type(failure).__name__}"
        )
    
    failures = list(failure)
    if not failures:
        logger.debug("fail() called with an empty failure sequence")
        raise EmptyFailuresError("fail() requires at least one failure")
    
    return FailureOr.from_failures(failures)
