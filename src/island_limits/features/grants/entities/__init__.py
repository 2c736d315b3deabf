"""Grant entities package.

Grant results and protocols for the capability grammar.
"""

from .grant import Grant, RejectedGrant, ParseResult
from .protocols import ResourceResolver, DiagnosticsSink

__all__ = [
    # Domain entities
    "Grant",
    "RejectedGrant",
    "ParseResult",

    # Protocols
    "ResourceResolver",
    "DiagnosticsSink",
]
