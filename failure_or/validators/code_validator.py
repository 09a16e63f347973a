"""
Failure Code Validator.

Checks that failure codes follow the naming convention and are unique
within a result.
"""

from typing import Any, Iterable, List, Optional
from ..config.settings import Settings, get_settings
from ..config.patterns import PatternConfig, get_patterns
from ..core.failure import Failure
from ..core.failure_or import FailureOr
from ..core.interfaces import IValidator
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class FailureCodeValidator(IValidator):
    """
    Validates failure codes.
    
    Codes are a convention, not something Failure enforces, so this is
    meant for tests and boundary checks rather than the hot path.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        patterns: Optional[PatternConfig] = None
    ):
        """
        Initialize the validator.
        
        Args:
            settings: Settings to use (global settings if None)
            patterns: Patterns to use (global patterns if None)
        """
        self.settings = settings or get_settings()
        self.patterns = patterns or get_patterns()
    
    def validate(self, data: Any) -> bool:
        """
        Validate a code, a Failure, or the failures of a FailureOr.
        
        Args:
            data: Code string, Failure, or FailureOr
            
        Returns:
            True if every code is well formed (and unique when required)
        """
        if isinstance(data, str):
            return self.is_valid_code(data)
        
        if isinstance(data, Failure):
            return self.is_valid_code(data.code)
        
        if isinstance(data, FailureOr):
            failures = data.failures_or_empty_list
            invalid = [f.code for f in failures if not self.is_valid_code(f.code)]
            if invalid:
                logger.info(f"Code validation failed: malformed codes {invalid}")
                return False
            
            if self.settings.require_unique_failure_codes:
                duplicates = self.find_duplicate_codes(failures)
                if duplicates:
                    logger.info(f"Code validation failed: duplicate codes {duplicates}")
                    return False
            
            return True
        
        return False
    
    def is_valid_code(self, code: Any) -> bool:
        """
        Check a single code against the configured pattern.
        
        Args:
            code: Code to check
            
        Returns:
            True if the code is a string matching the pattern
        """
        if not isinstance(code, str):
            return False
        
        if self.patterns.get_failure_code_pattern().match(code) is None:
            logger.debug(f"Failure code '{code}' does not match the code pattern")
            return False
        
        return True
    
    def find_duplicate_codes(self, failures: Iterable[Failure]) -> List[str]:
        """
        Find codes that occur more than once.
        
        Args:
            failures: Failures to inspect
            
        Returns:
            Repeated codes, in the order they were first seen
        """
        seen = set()
        duplicates: List[str] = []
        
        for failure in failures:
            if failure.code in seen and failure.code not in duplicates:
                duplicates.append(failure.code)
            seen.add(failure.code)
        
        return duplicates
