"""Protocol for language fallback policies."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class FallbackProvider(Protocol):
    """Derives broader language codes to try when a localized file is missing.

    Allows swapping the region-subtag policy for a custom chain.
    """

    def fallbacks_for(self, lang: str) -> list[str]:
        """Return fallback codes in the order they should be tried."""
        ...
