"""Grant parser for the capability grammar.

Turns capability strings of the form
``<gamemode-prefix>island.limit.<RESOURCE>.<NUMBER>`` into typed grants.
Parsing is pure; rejections are only reported by ``parse_all`` through the
injected diagnostics sink.
"""

import logging
from typing import Iterable, List, Optional

from ....config.constants import PermissionGrammar, RejectionReason
from ....config.settings import LimitsSettings, get_settings
from ....core.value_objects import BlockKind, EntityKind
from ..entities import (
    Grant, RejectedGrant, ParseResult,
    ResourceResolver, DiagnosticsSink
)


logger = logging.getLogger(__name__)


class GrantParser:
    """Parser turning one capability string into a grant or a rejection."""

    def __init__(
        self,
        resolver: ResourceResolver,
        diagnostics: Optional[DiagnosticsSink] = None,
        settings: Optional[LimitsSettings] = None
    ):
        """Initialize the parser.

        Args:
            resolver: Resolves resource names and entity eligibility
            diagnostics: Optional sink receiving rejections from ``parse_all``
            settings: Grammar settings (uses cached environment settings if omitted)
        """
        self._resolver = resolver
        self._diagnostics = diagnostics
        self._settings = settings or get_settings()
        self._always_allowed = frozenset(self._settings.always_allowed_entities)

    def parse(self, capability: str, prefix: str) -> Optional[ParseResult]:
        """Parse a single capability string.

        Args:
            capability: Raw capability string held by an occupant
            prefix: Game-mode limit prefix, e.g. ``bskyblock.island.limit.``

        Returns:
            None if the string does not start with ``prefix``, otherwise a
            ``Grant`` or a ``RejectedGrant``
        """
        if not capability.startswith(prefix):
            return None

        if prefix + PermissionGrammar.WILDCARD in capability:
            return RejectedGrant(
                capability, RejectionReason.WILDCARD, "Wildcards are not allowed."
            )

        segments = capability.split(PermissionGrammar.SEPARATOR)
        if len(segments) != PermissionGrammar.SEGMENT_COUNT:
            return RejectedGrant(
                capability,
                RejectionReason.MALFORMED,
                f"format must be '{prefix}MATERIAL/ENTITY-TYPE.NUMBER'"
            )

        limit = self._parse_limit(segments[PermissionGrammar.LIMIT_SEGMENT])
        if limit is None:
            return RejectedGrant(
                capability, RejectionReason.NOT_A_NUMBER, "the last part MUST be a number!"
            )

        key = segments[PermissionGrammar.RESOURCE_SEGMENT].upper()

        material = self._resolver.resolve_block(key)
        if material is not None:
            return Grant(BlockKind(material), limit)

        entity_type = self._resolver.resolve_entity(key)
        if entity_type is None:
            return RejectedGrant(
                capability,
                RejectionReason.UNKNOWN_RESOURCE,
                f"{key} is not a valid material or entity type."
            )

        if not self.is_entity_eligible(entity_type):
            return RejectedGrant(
                capability,
                RejectionReason.UNSUPPORTED_ENTITY,
                f"entity type {key} is not supported."
            )

        return Grant(EntityKind(entity_type), limit)

    def parse_all(
        self,
        capabilities: Iterable[str],
        prefix: str,
        occupant_name: str = ""
    ) -> List[Grant]:
        """Parse every capability string and keep the valid grants.

        Each string is handled independently; a rejection is reported and
        skipped without affecting the remaining strings.
        """
        grants: List[Grant] = []
        rejected = 0

        for capability in capabilities:
            result = self.parse(capability, prefix)
            if result is None:
                continue
            if isinstance(result, RejectedGrant):
                rejected += 1
                self._report(occupant_name, result)
                continue
            grants.append(result)

        logger.debug(
            f"Parsed {len(grants)} grants for '{occupant_name}' with prefix '{prefix}'",
            extra={"prefix": prefix, "grants": len(grants), "rejected": rejected}
        )
        return grants

    def is_entity_eligible(self, entity_type_id: str) -> bool:
        """Check if limits may be granted for an entity type."""
        if entity_type_id in self._always_allowed:
            return True
        return (
            self._resolver.is_spawnable(entity_type_id)
            and not self._resolver.is_disallowed(entity_type_id)
        )

    def _parse_limit(self, raw: str) -> Optional[int]:
        """Parse the trailing limit segment; None if it is not a usable number."""
        if not raw or not raw.isascii() or not raw.isdigit():
            return None
        try:
            limit = int(raw)
        except (ValueError, OverflowError):
            return None
        if limit > self._settings.max_limit:
            return None
        return limit

    def _report(self, occupant_name: str, rejection: RejectedGrant) -> None:
        if self._diagnostics is None:
            logger.warning(
                f"Ignoring capability '{rejection.raw}' for '{occupant_name}': {rejection.message}"
            )
            return
        try:
            self._diagnostics.log_rejection(occupant_name, rejection.raw, rejection.message)
        except Exception:
            logger.exception(
                f"Diagnostics sink failed for capability '{rejection.raw}'",
                extra={"occupant_name": occupant_name, "capability": rejection.raw}
            )


# Factory function for dependency injection
def create_grant_parser(
    resolver: ResourceResolver,
    diagnostics: Optional[DiagnosticsSink] = None,
    settings: Optional[LimitsSettings] = None
) -> GrantParser:
    """Create grant parser."""
    return GrantParser(resolver=resolver, diagnostics=diagnostics, settings=settings)
