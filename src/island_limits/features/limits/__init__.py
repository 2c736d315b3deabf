"""Limits feature for island-limits.

Per-island override records:
- entities/: OverrideRecord and the override store protocol
- services/: Max-wins limit merger
- repositories/: In-memory override store
"""

from .entities import OverrideRecord, OverrideStore
from .services import LimitMerger, MergeResult
from .repositories import InMemoryOverrideStore

__all__ = [
    # Entities
    "OverrideRecord",

    # Protocols
    "OverrideStore",

    # Services
    "LimitMerger",
    "MergeResult",

    # Repository Implementations
    "InMemoryOverrideStore",
]
