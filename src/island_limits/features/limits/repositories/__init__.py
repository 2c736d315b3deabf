"""Limit repositories package."""

from .memory_override_store import InMemoryOverrideStore

__all__ = ["InMemoryOverrideStore"]
