"""
Validators module.

Provides failure code validation.
"""

from .code_validator import FailureCodeValidator

__all__ = [
    'FailureCodeValidator',
]
