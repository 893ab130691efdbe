"""Fallback from a region-qualified language code to its base subtag."""

import re

# "de_DE", "pt-BR", "zh_Hans"
_REGION_QUALIFIED = re.compile(r"^([A-Za-z]+)[_-]([A-Za-z0-9]+)$")


class RegionFallbackProvider:
    """Maps ``de_DE`` to ``["de"]``; plain codes have no fallback."""

    def fallbacks_for(self, lang: str) -> list[str]:
        match = _REGION_QUALIFIED.match(lang)
        if match is None:
            return []
        return [match.group(1)]
