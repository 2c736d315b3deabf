"""Exceptions module for island-limits.

This module provides the exception hierarchy for island-limits.
"""

from .base import IslandLimitsError

from .domain import (
    ValidationError,
    InvalidIdentifierError,
    InvalidLimitError,
    RecordFormatError,
    OverrideStoreError,
)

__all__ = [
    "IslandLimitsError",
    "ValidationError",
    "InvalidIdentifierError",
    "InvalidLimitError",
    "RecordFormatError",
    "OverrideStoreError",
]
