"""Protocol for the key/value application configuration store."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ConfigStore(Protocol):
    """Read access to namespaced configuration values.

    Values are stored as strings; typing happens at the configuration
    boundary (see ``agreedisclaimer.settings.config``).
    """

    def get_value(
        self, namespace: str, key: str, default: Optional[str] = None
    ) -> Optional[str]:
        """Return the stored value, or ``default`` if the key is absent."""
        ...
