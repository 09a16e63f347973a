"""
Library settings and configuration.

Values come from environment variables. A .env file is read only when
its path is passed in explicitly.
"""

import os
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from .patterns import DEFAULT_FAILURE_CODE_PATTERN


class Settings:
    """
    Library settings.
    
    Centralizes all configuration values.
    """
    
    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize settings from environment and defaults.
        
        Args:
            env_file: Optional .env file to load into the environment first
        """
        if env_file:
            load_dotenv(env_file)
        
        # Logging Settings
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        
        # Validation Settings
        self.failure_code_pattern = os.getenv(
            'FAILURE_CODE_PATTERN',
            DEFAULT_FAILURE_CODE_PATTERN
        )
        self.require_unique_failure_codes = (
            os.getenv('REQUIRE_UNIQUE_FAILURE_CODES', 'true').lower() == 'true'
        )
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        
        Args:
            key: Configuration key (supports dot notation)
            default: Default value if not found
            
        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self
        
        for k in keys:
            if hasattr(value, k):
                value = getattr(value, k)
            else:
                return default
        
        return value if value is not None else default
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'log_level': self.log_level,
            'log_format': self.log_format,
            'failure_code_pattern': self.failure_code_pattern,
            'require_unique_failure_codes': self.require_unique_failure_codes,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings(env_file: Optional[str] = None) -> Settings:
    """
    Get the global settings instance.
    
    Args:
        env_file: Optional .env file, read only when the instance is first built
    """
    global _settings
    if _settings is None:
        _settings = Settings(env_file)
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
