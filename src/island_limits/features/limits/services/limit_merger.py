"""Limit merger folding grants into an override record.

Max-wins: a stored value only ever rises, so the merge result does not
depend on the order of the grants.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from ....core.value_objects import AnyResourceKind
from ...grants.entities import Grant
from ..entities import OverrideRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeResult:
    """Result of merging grants into an override record."""

    record: OverrideRecord
    changed: bool
    changed_kinds: Tuple[AnyResourceKind, ...] = field(default_factory=tuple)


class LimitMerger:
    """Merges an occupant's grants into an island's override record."""

    def merge(self, record: OverrideRecord, grants: Iterable[Grant]) -> MergeResult:
        """Fold grants into a copy of ``record``.

        The input record is left untouched. A kind with no stored value
        takes the grant's limit as its initial value.

        Returns:
            Merged copy and whether any entry was added or raised
        """
        merged = record.copy()
        changed_kinds = []

        for grant in grants:
            current = merged.get_limit(grant.resource_kind)
            if current is not None and current >= grant.limit:
                continue
            merged.set_limit(grant.resource_kind, grant.limit)
            if grant.resource_kind not in changed_kinds:
                changed_kinds.append(grant.resource_kind)

        if changed_kinds:
            logger.debug(
                f"Merged {len(changed_kinds)} changed limits into island {record.island_id}",
                extra={
                    "island_id": str(record.island_id),
                    "changed": [str(kind) for kind in changed_kinds]
                }
            )

        return MergeResult(
            record=merged,
            changed=bool(changed_kinds),
            changed_kinds=tuple(changed_kinds)
        )
