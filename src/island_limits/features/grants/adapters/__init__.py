"""Grant adapters package.

Concrete resolver and diagnostics implementations.
"""

from .static_resource_resolver import StaticResourceResolver
from .logging_diagnostics_sink import LoggingDiagnosticsSink

__all__ = ["StaticResourceResolver", "LoggingDiagnosticsSink"]
