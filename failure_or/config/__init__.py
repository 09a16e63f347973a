"""
Configuration management module.

Centralizes settings and patterns.
"""

from .settings import Settings, get_settings, set_settings
from .patterns import PatternConfig, get_patterns, set_patterns

__all__ = [
    'Settings',
    'get_settings',
    'set_settings',
    'PatternConfig',
    'get_patterns',
    'set_patterns',
]
