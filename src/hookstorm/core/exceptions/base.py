"""Base exceptions for hookstorm.

This module defines the root of the hookstorm exception hierarchy.
All exceptions inherit from HookstormError and carry an error code and
structured details so the HTTP layer can branch on the exception class
instead of on message text.
"""

from typing import Any, Dict, Optional


class HookstormError(Exception):
    """Base exception for all hookstorm errors."""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for API responses."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as _mapped_status_code
    return _mapped_status_code(exception)
