"""Size-capped file reads."""

import logging
from pathlib import Path

from agreedisclaimer import APP_ID
from agreedisclaimer.protocols import DiagnosticsSink

BYTES_PER_MB = 1_048_576


class ContentLoader:
    """Reads at most ``max_bytes`` from the start of a file.

    Content beyond the cap is dropped silently: the cap only bounds memory
    and response size, so callers detect truncation by content length.
    """

    def __init__(self, diagnostics: DiagnosticsSink, namespace: str = APP_ID):
        self._diagnostics = diagnostics
        self._namespace = namespace

    def read_capped(self, path: Path | str, max_bytes: int) -> tuple[str, str]:
        """Read a text file up to a byte cap.

        Args:
            path: File to read
            max_bytes: Maximum number of bytes returned

        Returns:
            ``(content, error)``. On success ``error`` is empty, even when the
            file itself is empty. On an I/O failure ``content`` is empty and
            the failure is reported once to the diagnostics sink.
        """
        try:
            with open(path, "rb") as f:
                raw = f.read(max(max_bytes, 0))
        except OSError:
            message = (
                f"Could not read contents from file:\n{path}\n\n"
                "Make sure that the file exists and that it is readable "
                "by the web server user"
            )
            self._diagnostics.log(self._namespace, message, logging.CRITICAL)
            return "", message

        return raw.decode("utf-8", errors="replace"), ""
