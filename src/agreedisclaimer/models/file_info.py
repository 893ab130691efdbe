"""Result record for a resolved disclaimer document."""

from dataclasses import dataclass, replace
from typing import Any, Optional

from agreedisclaimer.exceptions import InvalidModelError


@dataclass(frozen=True)
class FileInfo:
    """Outcome of resolving one document (text or PDF).

    ``path``, ``name`` and ``url`` describe the last candidate examined,
    which is the winning file when ``exists`` is true.
    """

    exists: bool
    lang: str
    name: str
    path: str
    url: str
    content: Optional[str] = None  # None when content was not requested
    error: str = ""

    def __post_init__(self) -> None:
        if not self.exists and not self.error:
            raise InvalidModelError(f"Missing file {self.path} must carry an error")
        if not self.exists and self.content is not None:
            raise InvalidModelError(f"Missing file {self.path} cannot have content")

    def with_content(self, content: str, error: str = "") -> "FileInfo":
        """Return a copy carrying the (possibly truncated) file content."""
        return replace(self, content=content, error=error)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "exists": self.exists,
            "lang": self.lang,
            "name": self.name,
            "path": self.path,
            "url": self.url,
            "error": self.error,
        }
        if self.content is not None:
            data["content"] = self.content
        return data
