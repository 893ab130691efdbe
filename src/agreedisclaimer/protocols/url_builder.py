"""Protocol for building public URLs to application assets."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class UrlBuilder(Protocol):
    def link_to(self, namespace: str, relative_path: str) -> str:
        """Return the browser URL of ``relative_path`` inside ``namespace``."""
        ...
