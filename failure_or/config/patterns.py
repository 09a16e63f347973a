"""
Regex pattern definitions.

Centralizes the patterns used to check failure codes.
"""

import re
from typing import Optional, Pattern

# Dotted identifiers such as "General.NotFound" or "ValueError".
DEFAULT_FAILURE_CODE_PATTERN = r'^[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*$'


class PatternConfig:
    """
    Configuration for regex patterns.
    
    Compiles patterns once for performance.
    """
    
    def __init__(self, failure_code_pattern: Optional[str] = None):
        """
        Initialize and compile all patterns.
        
        Args:
            failure_code_pattern: Override for the failure code pattern
        """
        self.failure_code_pattern = re.compile(
            failure_code_pattern or DEFAULT_FAILURE_CODE_PATTERN
        )
    
    def get_failure_code_pattern(self) -> Pattern:
        """Get the compiled failure code pattern."""
        return self.failure_code_pattern


_patterns: Optional[PatternConfig] = None


def get_patterns() -> PatternConfig:
    """Get the global pattern configuration, built from settings on first use."""
    global _patterns
    if _patterns is None:
        from .settings import get_settings
        _patterns = PatternConfig(get_settings().failure_code_pattern)
    return _patterns


def set_patterns(patterns: Optional[PatternConfig]):
    """Set the global pattern configuration (None rebuilds it on next use)."""
    global _patterns
    _patterns = patterns
