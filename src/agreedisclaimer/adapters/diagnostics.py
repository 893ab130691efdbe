"""Diagnostics sink backed by the standard logging module."""

import logging


class LoggingDiagnosticsSink:
    """Writes each entry to the logger named after its namespace."""

    def log(self, namespace: str, message: str, severity: int) -> None:
        logging.getLogger(namespace).log(severity, message)
