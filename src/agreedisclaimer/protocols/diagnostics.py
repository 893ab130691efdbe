"""Protocol for operational diagnostics."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Receives log entries for environment problems (e.g. unreadable files).

    ``severity`` is a standard ``logging`` level such as ``logging.CRITICAL``.
    """

    def log(self, namespace: str, message: str, severity: int) -> None:
        ...
