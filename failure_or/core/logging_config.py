"""
Logging for the failure_or package.

Modules log through get_logger(). Nothing here touches the root logger:
the package logger carries a NullHandler until a host opts in with
setup_logging() or configure_from_settings().
"""

import logging
import sys
from typing import Optional
from pathlib import Path

LIBRARY_LOGGER = 'failure_or'

# Set on handlers installed by setup_logging so a later call can replace them.
_HANDLER_MARK = '_failure_or_handler'


def setup_logging(
    level: str = 'INFO',
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach output handlers to the package logger.
    
    Calling it again replaces the handlers of the previous call.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (uses default if None)
        log_file: Optional log file path
        
    Returns:
        The package logger
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    
    package_logger = logging.getLogger(LIBRARY_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            package_logger.removeHandler(handler)
            handler.close()
    
    handlers = [logging.StreamHandler(sys.stdout)]
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    
    formatter = logging.Formatter(format_string)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        package_logger.addHandler(handler)
    
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_from_settings(settings) -> logging.Logger:
    """
    Configure the package logger from a settings object.
    
    Args:
        settings: Settings object with log_level and log_format
    """
    return setup_logging(
        level=settings.log_level,
        format_string=settings.log_format
    )
