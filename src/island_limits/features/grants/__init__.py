"""Grants feature for island-limits.

Capability grammar for limit permissions:
- entities/: Grant results and resolver/diagnostics protocols
- services/: Grant parser
- adapters/: Static resolver and logging diagnostics sink
"""

from .entities import (
    Grant, RejectedGrant, ParseResult,
    ResourceResolver, DiagnosticsSink
)

from .services import GrantParser, create_grant_parser

from .adapters import StaticResourceResolver, LoggingDiagnosticsSink

__all__ = [
    # Entities
    "Grant",
    "RejectedGrant",
    "ParseResult",

    # Protocols
    "ResourceResolver",
    "DiagnosticsSink",

    # Services
    "GrantParser",
    "create_grant_parser",

    # Adapters
    "StaticResourceResolver",
    "LoggingDiagnosticsSink",
]
