"""Protocol for message translation."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageCatalog(Protocol):
    """Translates a printf-style template and substitutes its arguments."""

    def translate(self, template: str, *args: object) -> str:
        ...
