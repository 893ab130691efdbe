"""Locates the localized variant of a disclaimer document on disk."""

import logging
import os
from pathlib import Path
from typing import Optional

from agreedisclaimer import APP_ID
from agreedisclaimer.fallbacks import RegionFallbackProvider
from agreedisclaimer.models import FileInfo
from agreedisclaimer.protocols import FallbackProvider, MessageCatalog, UrlBuilder
from agreedisclaimer.utils import normalize_line_breaks

logger = logging.getLogger(__name__)


class FileResolver:
    """Finds ``{prefix}_{lang}.{extension}`` under a base directory.

    The requested language is tried first. If it is missing, the fallback
    codes of the requested language are tried (only when fallback is
    enabled), then the default language when it differs from the requested
    one. The first existing candidate wins.
    """

    def __init__(
        self,
        file_prefix: str,
        catalog: MessageCatalog,
        url_builder: UrlBuilder,
        fallback_provider: Optional[FallbackProvider] = None,
        namespace: str = APP_ID,
    ):
        self.file_prefix = file_prefix
        self._catalog = catalog
        self._urls = url_builder
        self._fallbacks = fallback_provider or RegionFallbackProvider()
        self._namespace = namespace

    def file_name(self, lang: str, extension: str) -> str:
        """Return the on-disk name of the document for ``lang``."""
        return f"{self.file_prefix}_{lang}.{extension}"

    def candidate_languages(
        self, user_lang: str, default_lang: str, use_fallback: bool = True
    ) -> list[str]:
        """Languages tried after ``user_lang`` itself was not found."""
        languages: list[str] = []
        if use_fallback:
            languages.extend(self._fallbacks.fallbacks_for(user_lang))
        if user_lang != default_lang:
            languages.append(default_lang)
        return languages

    def resolve(
        self,
        user_lang: str,
        default_lang: str,
        base_path: Path | str,
        extension: str,
        use_fallback: bool = True,
    ) -> FileInfo:
        """Resolve the document for ``user_lang``; content is never loaded.

        Args:
            user_lang: Requested language code
            default_lang: Configured default language
            base_path: Directory holding the documents for ``extension``
            extension: File extension without dot ('txt' or 'pdf')
            use_fallback: Whether fallback codes of ``user_lang`` are tried

        Returns:
            FileInfo describing the winning file, or the last candidate
            examined together with an error when none exists
        """
        base = Path(base_path)
        user_path = base / self.file_name(user_lang, extension)

        path = user_path
        found_lang: Optional[str] = user_lang if os.path.exists(path) else None
        if found_lang is None:
            for lang in self.candidate_languages(user_lang, default_lang, use_fallback):
                path = base / self.file_name(lang, extension)
                if os.path.exists(path):
                    found_lang = lang
                    break

        url = self._urls.link_to(self._namespace, f"{extension}/{path.name}")
        if found_lang is not None:
            if found_lang != user_lang:
                logger.debug(f"Using {path.name} for language {user_lang}")
            return FileInfo(
                exists=True, lang=found_lang, name=path.name, path=str(path), url=url
            )

        if user_lang != default_lang:
            default_path = base / self.file_name(default_lang, extension)
            error = self._neither_exists(user_path, default_path)
        else:
            error = self._does_not_exist(user_path)

        # path, name and url describe the last candidate examined
        return FileInfo(
            exists=False,
            lang=user_lang,
            name=path.name,
            path=str(path),
            url=url,
            error=normalize_line_breaks(error),
        )

    def _does_not_exist(self, path: Path) -> str:
        t = self._catalog.translate
        return t("%s doesn't exist.", f"{path}<br/>") + " " + t("Please contact the webmaster")

    def _neither_exists(self, user_path: Path, default_path: Path) -> str:
        t = self._catalog.translate
        message = t(
            "Neither the file: %s nor: %s exist",
            f"<br/>{user_path}<br/><br/>",
            f"<br/>{default_path}<br/><br/>",
        )
        return message + ". " + t("Please contact the webmaster")
