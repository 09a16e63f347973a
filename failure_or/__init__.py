"""
failure_or: a value-or-failures result type.

    from failure_or import Failure, fail, ok

    def find_user(user_id):
        user = users.get(user_id)
        if user is None:
            return fail(Failure.not_found('User.NotFound', f'No user {user_id}.'))
        return ok(user)
"""

import logging

from .core import (
    CustomFailureType,
    EmptyFailuresError,
    Failed,
    Failure,
    FailureOr,
    FailureOrError,
    FailureType,
    IFailureOr,
    IValidator,
    InvalidStateAccess,
    Marker,
    Result,
    Success,
    fail,
    ok,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '1.0.0'

__all__ = [
    'CustomFailureType',
    'EmptyFailuresError',
    'Failed',
    'Failure',
    'FailureOr',
    'FailureOrError',
    'FailureType',
    'IFailureOr',
    'IValidator',
    'InvalidStateAccess',
    'Marker',
    'Result',
    'Success',
    'fail',
    'ok',
]
