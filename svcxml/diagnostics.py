"""Diagnostics sinks receiving rendered documents when a test asks for them."""

from __future__ import annotations

import logging
from typing import Protocol


class DiagnosticsSink(Protocol):
    def write_line(self, line: str) -> None: ...


class LoggingSink:
    """Forward each line to a logger at INFO level (pytest shows it under captured log)."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def write_line(self, line: str) -> None:
        self._logger.info("%s", line)
