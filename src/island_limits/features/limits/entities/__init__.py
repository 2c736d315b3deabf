"""Limit entities package."""

from .override_record import OverrideRecord
from .protocols import OverrideStore

__all__ = [
    "OverrideRecord",
    "OverrideStore",
]
