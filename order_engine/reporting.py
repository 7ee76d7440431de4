"""
Reporting sink: receives (message, severity) for validation rejections, transition outcomes
and subscriber events. Presentation layers plug in their own reporter.
"""
import logging
from typing import Literal, Protocol

logger = logging.getLogger(__name__)

Severity = Literal["info", "success", "warning", "error"]

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class Reporter(Protocol):
    def report(self, message: str, severity: Severity = "info") -> None: ...


class LoggingReporter:
    """Writes every report to the standard logging tree."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def report(self, message: str, severity: Severity = "info") -> None:
        if severity not in _LOG_LEVELS:
            raise ValueError(f"Unknown severity: {severity!r}")
        self._log.log(_LOG_LEVELS[severity], "[%s] %s", severity, message)


class RecordingReporter:
    """
    Keeps reports in memory, oldest first. Used by views that render a notice list
    and by tests. Optionally forwards each report to another reporter.
    """

    def __init__(self, forward: Reporter | None = None) -> None:
        self.records: list[tuple[str, Severity]] = []
        self._forward = forward

    def report(self, message: str, severity: Severity = "info") -> None:
        if severity not in _LOG_LEVELS:
            raise ValueError(f"Unknown severity: {severity!r}")
        self.records.append((message, severity))
        if self._forward is not None:
            self._forward.report(message, severity)

    def messages(self, severity: Severity | None = None) -> list[str]:
        return [m for m, s in self.records if severity is None or s == severity]

    def clear(self) -> None:
        self.records.clear()
