"""Grant entities for the island-limits grants feature.

A capability string parses into either a ``Grant`` carrying a resource kind
and its ceiling, or a ``RejectedGrant`` describing why it was refused.
Both are transient and never persisted.
"""

from dataclasses import dataclass
from typing import Union

from ....config.constants import RejectionReason
from ....core.exceptions import InvalidLimitError
from ....core.value_objects import AnyResourceKind


@dataclass(frozen=True)
class Grant:
    """A validated limit for one resource kind."""

    resource_kind: AnyResourceKind
    limit: int

    def __post_init__(self):
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise InvalidLimitError(f"Limit must be an integer, got: {self.limit!r}")
        if self.limit < 0:
            raise InvalidLimitError(f"Limit must not be negative, got: {self.limit}")

    def __str__(self) -> str:
        return f"Grant({self.resource_kind}={self.limit})"


@dataclass(frozen=True)
class RejectedGrant:
    """A capability string that matched the prefix but could not be honored."""

    raw: str
    reason: RejectionReason
    message: str

    def __str__(self) -> str:
        return f"RejectedGrant({self.raw!r}, {self.reason.value})"


ParseResult = Union[Grant, RejectedGrant]
