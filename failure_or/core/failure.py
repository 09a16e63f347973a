"""
Failure descriptor.

A Failure is an immutable record of one classified failure reason: a
machine-readable code, a human-readable description and a classification.
"""

from dataclasses import dataclass
from typing import Any

from .failure_type import Classification, CustomFailureType, FailureType, classify


@dataclass(frozen=True)
class Failure:
    """
    Represents a single failure.

    Instances are created through the named constructors below and compare
    by their three fields.

    Example:
        failure = Failure.not_found('User.NotFound', 'No user with id 42.')
        failure.type == FailureType.NOT_FOUND  # True
    """

    code: str
    description: str
    type: Classification

    @property
    def is_custom(self) -> bool:
        """Check if the failure carries a caller-defined classification."""
        return isinstance(self.type, CustomFailureType)

    @classmethod
    def create(
        cls,
        code: str = 'General.Failure',
        description: str = 'A failure has occurred.'
    ) -> 'Failure':
        """Create a failure of type DEFAULT."""
        return cls(code, description, FailureType.DEFAULT)

    @classmethod
    def unexpected(
        cls,
        code: str = 'General.Unexpected',
        description: str = 'An unexpected failure has occurred.'
    ) -> 'Failure':
        """Create a failure of type UNEXPECTED."""
        return cls(code, description, FailureType.UNEXPECTED)

    @classmethod
    def validation(
        cls,
        code: str = 'General.Validation',
        description: str = 'A validation failure has occurred.'
    ) -> 'Failure':
        """Create a failure of type VALIDATION."""
        return cls(code, description, FailureType.VALIDATION)

    @classmethod
    def conflict(
        cls,
        code: str = 'General.Conflict',
        description: str = 'A conflict has occurred.'
    ) -> 'Failure':
        """Create a failure of type CONFLICT."""
        return cls(code, description, FailureType.CONFLICT)

    @classmethod
    def not_found(
        cls,
        code: str = 'General.NotFound',
        description: str = "A 'Not Found' failure has occurred."
    ) -> 'Failure':
        """Create a failure of type NOT_FOUND."""
        return cls(code, description, FailureType.NOT_FOUND)

    @classmethod
    def unauthorized(
        cls,
        code: str = 'General.Unauthorized',
        description: str = "An 'Unauthorized' failure has occurred."
    ) -> 'Failure':
        """Create a failure of type UNAUTHORIZED."""
        return cls(code, description, FailureType.UNAUTHORIZED)

    @classmethod
    def custom(cls, code: str, description: str, type: Any) -> 'Failure':
        """
        Create a failure with a caller-supplied classification.

        Args:
            code: Failure code
            description: Failure description
            type: FailureType member, or any str/int for a custom category

        Returns:
            Failure classified by the given value
        """
        return cls(code, description, classify(type))

    @classmethod
    def from_error(cls, error: BaseException) -> 'Failure':
        """
        Create an UNEXPECTED failure from an exception.

        The exception class name becomes the code and its message the
        description.
        """
        return cls.unexpected(error.__class__.__name__, str(error))
