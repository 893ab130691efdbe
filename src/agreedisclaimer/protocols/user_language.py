"""Protocol for the language of the calling user."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CurrentUserLanguage(Protocol):
    def get_language(self) -> str:
        """Return the active language code, e.g. 'de' or 'de_DE'."""
        ...
