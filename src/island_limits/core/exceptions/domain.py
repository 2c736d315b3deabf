"""Domain-specific exceptions for island-limits."""

from .base import IslandLimitsError


# Validation Errors
class ValidationError(IslandLimitsError, ValueError):
    """Raised when a value object or record fails validation."""
    pass


class InvalidIdentifierError(ValidationError):
    """Raised when an island, occupant or resource identifier is invalid."""
    pass


class InvalidLimitError(ValidationError):
    """Raised when a limit value is negative or not an integer."""
    pass


class RecordFormatError(ValidationError):
    """Raised when a serialized override record cannot be read."""
    pass


# Storage Errors
class OverrideStoreError(IslandLimitsError):
    """Raised when the override store cannot read or write a record."""
    pass
