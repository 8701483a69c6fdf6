"""
Custom exceptions for the coursework simulator.

Domain operations never raise; missing students or assignments resolve to
benign defaults. These cover the ambient layers around the domain.
"""

from typing import Optional, Any, Dict


class CourseworkException(Exception):
    """Base exception for all coursework errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(CourseworkException):
    """Raised when configuration is invalid."""
    pass


class SchedulingError(CourseworkException):
    """Raised when a delayed task cannot be scheduled or fails while running."""
    pass
