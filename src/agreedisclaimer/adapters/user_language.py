"""Current-user language supplied by the caller."""


class FixedUserLanguage:
    """Returns the language code given at construction."""

    def __init__(self, lang: str):
        self.lang = lang

    def get_language(self) -> str:
        return self.lang
