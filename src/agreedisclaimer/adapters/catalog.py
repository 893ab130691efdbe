"""Mapping-backed message catalog."""

from typing import Mapping, Optional

GERMAN_MESSAGES = {
    "%s doesn't exist.": "%s wurde nicht gefunden.",
    "Neither the file: %s nor: %s exist": "Weder die Datei %s noch: %s wurden gefunden",
    "Please contact the webmaster": "Bitte kontaktieren Sie den Website-Administrator",
}


class StaticCatalog:
    """Looks templates up in a fixed mapping; unknown templates pass through.

    A single list or tuple argument is spread over the ``%s`` placeholders.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._messages = dict(messages or {})

    def translate(self, template: str, *args: object) -> str:
        text = self._messages.get(template, template)
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            args = tuple(args[0])
        if not args:
            return text
        return text % args
