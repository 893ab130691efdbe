"""Wiring of the core components with their default collaborators."""

from pathlib import Path
from typing import Optional

from agreedisclaimer import APP_ID, FILE_PREFIX
from agreedisclaimer.adapters import (
    GERMAN_MESSAGES,
    LoggingDiagnosticsSink,
    PrefixUrlBuilder,
    StaticCatalog,
)
from agreedisclaimer.fallbacks import RegionFallbackProvider
from agreedisclaimer.loaders import ContentLoader
from agreedisclaimer.protocols import (
    ConfigStore,
    CurrentUserLanguage,
    DiagnosticsSink,
    MessageCatalog,
)
from agreedisclaimer.resolvers import FileResolver
from agreedisclaimer.settings import SettingsAggregator


def catalog_for(lang: str) -> StaticCatalog:
    """Pick the diagnostics catalog matching the base language of ``lang``."""
    base = RegionFallbackProvider().fallbacks_for(lang) or [lang]
    if base[0].lower() == "de":
        return StaticCatalog(GERMAN_MESSAGES)
    return StaticCatalog()


def build_aggregator(
    config_store: ConfigStore,
    text_base_path: Path | str,
    pdf_base_path: Path | str,
    user_language: CurrentUserLanguage,
    file_prefix: str = FILE_PREFIX,
    base_url: str = "/apps",
    catalog: Optional[MessageCatalog] = None,
    diagnostics: Optional[DiagnosticsSink] = None,
) -> SettingsAggregator:
    """Create a SettingsAggregator for one caller.

    Args:
        config_store: Store holding the application settings
        text_base_path: Directory with the ``{prefix}_{lang}.txt`` files
        pdf_base_path: Directory with the ``{prefix}_{lang}.pdf`` files
        user_language: Language of the calling user
        file_prefix: Document name prefix
        base_url: Prefix of the URLs built for documents and icons
        catalog: Translations for diagnostics; picked from the user's
            language if omitted
        diagnostics: Sink for read failures; standard logging if omitted
    """
    url_builder = PrefixUrlBuilder(base_url)
    resolver = FileResolver(
        file_prefix,
        catalog or catalog_for(user_language.get_language()),
        url_builder,
        namespace=APP_ID,
    )
    loader = ContentLoader(diagnostics or LoggingDiagnosticsSink(), namespace=APP_ID)
    return SettingsAggregator(
        config_store=config_store,
        resolver=resolver,
        loader=loader,
        user_language=user_language,
        url_builder=url_builder,
        text_base_path=text_base_path,
        pdf_base_path=pdf_base_path,
        app_id=APP_ID,
    )
