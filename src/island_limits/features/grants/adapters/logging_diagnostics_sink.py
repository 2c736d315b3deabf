"""Diagnostics sink writing rejected capabilities to the log."""

import logging
from typing import Optional

from ....config.logging_config import LoggingConfig


class LoggingDiagnosticsSink:
    """Diagnostics sink reporting rejections through ``logging``."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(LoggingConfig.DIAGNOSTICS_LOGGER)

    def log_rejection(self, occupant_name: str, raw_capability: str, reason: str) -> None:
        self._logger.warning(
            f"Player {occupant_name} has permission: '{raw_capability}' but {reason} Ignoring...",
            extra={"occupant_name": occupant_name, "capability": raw_capability}
        )
