"""
Diagnostic Sink

Receives findings from the validation engine and progress notices from the
record source, possibly from both threads at once. Each call writes one
complete message through the logging module, whose handlers serialise
writes, so concurrent messages never interleave.
"""

import logging
import threading
from collections import Counter
from typing import Dict, Optional

from proofreader.validation.report import COLUMN_COUNT, FIELD_FORMAT, Diagnostic


class DiagnosticSink:
    """Logging-backed destination for diagnostics and progress messages."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("proofreader.diagnostics")
        self._lock = threading.Lock()
        self._counts: Counter = Counter()

    def emit(self, diagnostic: Diagnostic) -> None:
        """Report one finding."""
        with self._lock:
            self._counts[diagnostic.kind] += 1
        self._logger.warning(diagnostic.format_human())

    def notify(self, message: str) -> None:
        """Report a progress or informational message."""
        self._logger.info(message)

    def trace(self, message: str) -> None:
        """Report a verbose detail, only visible at debug level."""
        self._logger.debug(message)

    def count(self, kind: str) -> int:
        with self._lock:
            return self._counts[kind]

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {
                COLUMN_COUNT: self._counts[COLUMN_COUNT],
                FIELD_FORMAT: self._counts[FIELD_FORMAT],
            }

    def reset(self) -> None:
        """Clear the finding counts before a new run."""
        with self._lock:
            self._counts.clear()
