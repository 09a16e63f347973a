"""
Failure classifications.

A classification is either one of the standard FailureType members or a
CustomFailureType carrying any caller-defined value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class FailureType(str, Enum):
    """Standard failure categories."""
    
    DEFAULT = 'Default'
    UNEXPECTED = 'Unexpected'
    VALIDATION = 'Validation'
    CONFLICT = 'Conflict'
    NOT_FOUND = 'NotFound'
    UNAUTHORIZED = 'Unauthorized'
    
    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomFailureType:
    """Caller-defined classification outside the standard categories."""
    
    value: Union[str, int]
    
    def __str__(self) -> str:
        return str(self.value)


Classification = Union[FailureType, CustomFailureType]


def classify(value: Any) -> Classification:
    """
    Normalize a classification value.
    
    Args:
        value: FailureType member, CustomFailureType, or any other value
        
    Returns:
        Standard members and custom types unchanged, anything else wrapped
        in CustomFailureType
    """
    if isinstance(value, (FailureType, CustomFailureType)):
        return value
    return CustomFailureType(value)
