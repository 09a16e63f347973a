"""
FailureOr: a value or a list of failures.

FailureOr is a tagged union with two variants, Success and Failed. Both are
frozen and every combinator returns a new instance, so a chain of calls reads
left to right and stops doing work at the first failure:

    result = (
        load_user(user_id)
        .map(check_permissions)
        .map(render_profile)
        .else_(lambda failures: ok(default_profile()))
    )

Variants also support structural pattern matching:

    match result:
        case Success(value):
            ...
        case Failed(reasons):
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from .exceptions import EmptyFailuresError, InvalidStateAccess
from .failure import Failure
from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')
U = TypeVar('U')
TResult = TypeVar('TResult')

NO_FAILURES = Failure.unexpected(
    'FailureOr.NoFailures',
    'Failures cannot be retrieved from a successful FailureOr'
)
NO_FIRST_FAILURE = Failure.unexpected(
    'FailureOr.NoFirstFailure',
    'First failure cannot be retrieved from a successful FailureOr'
)


class FailureOr(ABC, Generic[T]):
    """
    Base class of the Success and Failed variants.

    Construct instances with from_value / from_failure / from_failures, or
    with the ok() and fail() factory functions.
    """

    @property
    @abstractmethod
    def is_success(self) -> bool:
        """Check if the result holds a value."""

    @property
    def is_failure(self) -> bool:
        """Check if the result holds failures."""
        return not self.is_success

    @property
    @abstractmethod
    def failures(self) -> List[Failure]:
        """
        Get the failures as a new list, whatever sequence they were built from.

        On a success this is a single-element list holding the
        FailureOr.NoFailures sentinel.
        """

    @property
    @abstractmethod
    def failures_or_empty_list(self) -> List[Failure]:
        """Get the failures, or an empty list on a success."""

    @property
    @abstractmethod
    def first_failure(self) -> Failure:
        """
        Get the first failure.

        On a success this is the FailureOr.NoFirstFailure sentinel.
        """

    @property
    @abstractmethod
    def first_failure_or_none(self) -> Optional[Failure]:
        """Get the first failure, or None on a success."""

    @staticmethod
    def from_value(value: T) -> 'FailureOr[T]':
        """Create a success holding value."""
        return Success(value)

    @staticmethod
    def from_failure(failure: Failure) -> 'FailureOr[Any]':
        """Create a failed result holding a single failure."""
        return Failed((failure,))

    @staticmethod
    def from_failures(failures: Iterable[Failure]) -> 'FailureOr[Any]':
        """Create a failed result holding failures, in order."""
        return Failed(tuple(failures))

    def switch(
        self,
        on_value: Callable[[T], None],
        on_failure: Callable[[List[Failure]], None]
    ) -> None:
        """
        Run on_value with the value, or on_failure with all failures.

        Args:
            on_value: Callback for the success case
            on_failure: Callback for the failure case
        """
        if self.is_success:
            on_value(self.value)
        else:
            on_failure(self.failures)

    def switch_first(
        self,
        on_value: Callable[[T], None],
        on_failure: Callable[[Failure], None]
    ) -> None:
        """Run on_value with the value, or on_failure with the first failure."""
        if self.is_success:
            on_value(self.value)
        else:
            on_failure(self.first_failure)

    async def switch_async(
        self,
        on_value: Callable[[T], Awaitable[None]],
        on_failure: Callable[[List[Failure]], Awaitable[None]]
    ) -> None:
        """Await on_value with the value, or on_failure with all failures."""
        if self.is_success:
            await on_value(self.value)
        else:
            await on_failure(self.failures)

    async def switch_first_async(
        self,
        on_value: Callable[[T], Awaitable[None]],
        on_failure: Callable[[Failure], Awaitable[None]]
    ) -> None:
        """Await on_value with the value, or on_failure with the first failure."""
        if self.is_success:
            await on_value(self.value)
        else:
            await on_failure(self.first_failure)

    def match(
        self,
        on_value: Callable[[T], TResult],
        on_failure: Callable[[List[Failure]], TResult]
    ) -> TResult:
        """
        Return on_value(value), or on_failure(failures).

        Exactly one callback runs.

        Args:
            on_value: Callback for the success case
            on_failure: Callback for the failure case

        Returns:
            The result of the callback that ran
        """
        if self.is_success:
            return on_value(self.value)
        return on_failure(self.failures)

    def match_first(
        self,
        on_value: Callable[[T], TResult],
        on_failure: Callable[[Failure], TResult]
    ) -> TResult:
        """Return on_value(value), or on_failure(first_failure)."""
        if self.is_success:
            return on_value(self.value)
        return on_failure(self.first_failure)

    async def match_async(
        self,
        on_value: Callable[[T], Awaitable[TResult]],
        on_failure: Callable[[List[Failure]], Awaitable[TResult]]
    ) -> TResult:
        """Await and return on_value(value), or on_failure(failures)."""
        if self.is_success:
            return await on_value(self.value)
        return await on_failure(self.failures)

    async def match_first_async(
        self,
        on_value: Callable[[T], Awaitable[TResult]],
        on_failure: Callable[[Failure], Awaitable[TResult]]
    ) -> TResult:
        """Await and return on_value(value), or on_failure(first_failure)."""
        if self.is_success:
            return await on_value(self.value)
        return await on_failure(self.first_failure)

    def map(self, fn: Callable[[T], 'FailureOr[U]']) -> 'FailureOr[U]':
        """
        Chain a fallible step onto a success.

        On a success, fn is called with the value and its result is returned
        as is. On a failure, fn is not called and the failures are carried
        forward in a new Failed.

        Args:
            fn: Step taking the value and returning a FailureOr

        Returns:
            The step's result, or the forwarded failures
        """
        if self.is_failure:
            return Failed(tuple(self.failures))
        return fn(self.value)

    def else_(self, fn: Callable[[List[Failure]], 'FailureOr[T]']) -> 'FailureOr[T]':
        """
        Recover from a failure.

        On a failure, fn is called with all failures and its result is
        returned. On a success, fn is not called and self is returned.
        """
        if self.is_success:
            return self
        return fn(self.failures)


@dataclass(frozen=True)
class Success(FailureOr[T]):
    """Success variant holding exactly one value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def failures(self) -> List[Failure]:
        return [NO_FAILURES]

    @property
    def failures_or_empty_list(self) -> List[Failure]:
        return []

    @property
    def first_failure(self) -> Failure:
        return NO_FIRST_FAILURE

    @property
    def first_failure_or_none(self) -> Optional[Failure]:
        return None


@dataclass(frozen=True)
class Failed(FailureOr[T]):
    """
    Failure variant holding a non-empty, ordered tuple of failures.

    The first element is the primary failure.
    """

    reasons: Tuple[Failure, ...]

    def __post_init__(self):
        reasons = self.reasons
        if isinstance(reasons, Failure):
            reasons = (reasons,)
        reasons = tuple(reasons)

        if not reasons:
            logger.debug("Rejected empty failure sequence for Failed")
            raise EmptyFailuresError("A failed FailureOr requires at least one failure")

        for reason in reasons:
            if not isinstance(reason, Failure):
                raise TypeError(
                    f"Failed expects Failure instances, got {type(reason).__name__}"
                )

        object.__setattr__(self, 'reasons', reasons)

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> Any:
        """Always raises: a failed result has no value."""
        logger.debug(f"Value accessed on failed FailureOr: {self.reasons[0].code}")
        raise InvalidStateAccess(
            "Value cannot be retrieved from a failed FailureOr",
            failures=list(self.reasons)
        )

    @property
    def failures(self) -> List[Failure]:
        return list(self.reasons)

    @property
    def failures_or_empty_list(self) -> List[Failure]:
        return list(self.reasons)

    @property
    def first_failure(self) -> Failure:
        return self.reasons[0]

    @property
    def first_failure_or_none(self) -> Optional[Failure]:
        return self.reasons[0]

