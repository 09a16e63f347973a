"""
Core module providing the FailureOr result type.

Includes the Failure descriptor, the FailureOr variants, factory functions,
exceptions and protocols.
"""

from .exceptions import EmptyFailuresError, FailureOrError, InvalidStateAccess
from .factory import fail, ok
from .failure import Failure
from .failure_or import Failed, FailureOr, Success
from .failure_type import CustomFailureType, FailureType
from .interfaces import IFailureOr, IValidator
from .results import Marker, Result

__all__ = [
    'EmptyFailuresError',
    'FailureOrError',
    'InvalidStateAccess',
    'fail',
    'ok',
    'Failure',
    'Failed',
    'FailureOr',
    'Success',
    'CustomFailureType',
    'FailureType',
    'IFailureOr',
    'IValidator',
    'Marker',
    'Result',
]
