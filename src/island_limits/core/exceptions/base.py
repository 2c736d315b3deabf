"""Base exceptions for island-limits.

This module defines the base exception hierarchy for the island-limits
library. All exceptions inherit from IslandLimitsError and carry an error
code and structured details.
"""

from typing import Any, Dict, Optional


class IslandLimitsError(Exception):
    """Base exception for all island-limits errors.

    All exceptions in the library inherit from this base class and include
    structured error information for better debugging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging and serialization."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "type": self.__class__.__name__,
            }
        }
