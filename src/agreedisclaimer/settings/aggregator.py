"""Builds the settings and files payloads from configuration and disk."""

from pathlib import Path
from typing import Optional

from agreedisclaimer import APP_ID
from agreedisclaimer.loaders import ContentLoader
from agreedisclaimer.models import DocumentSettings, FileInfo, FilesPayload, Settings
from agreedisclaimer.protocols import ConfigStore, CurrentUserLanguage, UrlBuilder
from agreedisclaimer.resolvers import FileResolver
from agreedisclaimer.settings.config import (
    AppConfig,
    max_text_bytes,
    read_default_lang,
    read_max_text_size_mb,
)

TEXT_EXTENSION = "txt"
PDF_EXTENSION = "pdf"
PDF_ICON_PATH = "pdf/icon.png"


class SettingsAggregator:
    """Resolves the disclaimer documents for the admin form and the login page.

    Configuration is read from the store on every call, so changes apply
    without a restart. Two modes exist:

    - admin context: the default language is targeted and no fallback is
      used, so the admin sees exactly which configured file is missing
    - user context: the current user's language is targeted and the
      fallback chain applies
    """

    def __init__(
        self,
        config_store: ConfigStore,
        resolver: FileResolver,
        loader: ContentLoader,
        user_language: CurrentUserLanguage,
        url_builder: UrlBuilder,
        text_base_path: Path | str,
        pdf_base_path: Path | str,
        app_id: str = APP_ID,
    ):
        self._store = config_store
        self._resolver = resolver
        self._loader = loader
        self._user_language = user_language
        self._urls = url_builder
        self.text_base_path = str(text_base_path)
        self.pdf_base_path = str(pdf_base_path)
        self.app_id = app_id

    def get_settings(
        self, include_text_content: bool = True, is_admin_context: bool = False
    ) -> Settings:
        """Gather the configuration and the file info of enabled documents.

        Args:
            include_text_content: Whether to load the text file contents
            is_admin_context: Called from the admin form; every document is
                resolved regardless of its flag

        Returns:
            Settings for this call

        Raises:
            ConfigValueError: If a stored value cannot be parsed
        """
        config = AppConfig.load(self._store, self.app_id)
        user_lang, use_fallback = self._target_language(
            config.default_lang, is_admin_context
        )

        text_file = None
        if config.text_enabled or is_admin_context:
            text_file = self._resolve(
                user_lang,
                config.default_lang,
                self.text_base_path,
                TEXT_EXTENSION,
                use_fallback,
                config.max_text_bytes if include_text_content else None,
            )

        pdf_file = None
        if config.pdf_enabled or is_admin_context:
            pdf_file = self._resolve(
                user_lang,
                config.default_lang,
                self.pdf_base_path,
                PDF_EXTENSION,
                use_fallback,
            )

        return Settings(
            app_id=self.app_id,
            default_lang=config.default_lang,
            max_text_size_mb=config.max_text_size_mb,
            file_prefix=self._resolver.file_prefix,
            user_lang=user_lang,
            pdf_icon_url=self._urls.link_to(self.app_id, PDF_ICON_PATH),
            text=DocumentSettings(config.text_enabled, self.text_base_path, text_file),
            pdf=DocumentSettings(config.pdf_enabled, self.pdf_base_path, pdf_file),
        )

    def get_files(
        self, is_admin_context: bool = False, default_lang_override: Optional[str] = None
    ) -> FilesPayload:
        """Resolve both documents regardless of the enabled flags.

        The text document is always returned with its content.

        Args:
            is_admin_context: Disable fallback and target the default language
            default_lang_override: Default language to use instead of the
                configured one
        """
        default_lang = default_lang_override or read_default_lang(self._store, self.app_id)
        cap = max_text_bytes(read_max_text_size_mb(self._store, self.app_id))
        user_lang, use_fallback = self._target_language(default_lang, is_admin_context)

        return FilesPayload(
            text=self._resolve(
                user_lang,
                default_lang,
                self.text_base_path,
                TEXT_EXTENSION,
                use_fallback,
                cap,
            ),
            pdf=self._resolve(
                user_lang, default_lang, self.pdf_base_path, PDF_EXTENSION, use_fallback
            ),
        )

    def _target_language(self, default_lang: str, is_admin_context: bool) -> tuple[str, bool]:
        if is_admin_context:
            return default_lang, False
        return self._user_language.get_language(), True

    def _resolve(
        self,
        user_lang: str,
        default_lang: str,
        base_path: str,
        extension: str,
        use_fallback: bool,
        content_cap: Optional[int] = None,
    ) -> FileInfo:
        """Resolve one document; load its content when a cap is given."""
        info = self._resolver.resolve(
            user_lang, default_lang, base_path, extension, use_fallback
        )
        if content_cap is None or not info.exists:
            return info

        content, error = self._loader.read_capped(info.path, content_cap)
        return info.with_content(content, error)
