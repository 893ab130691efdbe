"""FastMCP server implementation for AgreeDisclaimer."""

import json
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from agreedisclaimer import FILE_PREFIX
from agreedisclaimer.adapters import FixedUserLanguage
from agreedisclaimer.factory import build_aggregator, catalog_for
from agreedisclaimer.protocols import ConfigStore
from agreedisclaimer.settings import read_default_lang


def create_mcp_server(
    config_store: ConfigStore,
    text_base_path: Path | str,
    pdf_base_path: Path | str,
    file_prefix: str = FILE_PREFIX,
    base_url: str = "/apps",
) -> FastMCP:
    """Create an MCP server serving the disclaimer settings.

    Nothing is cached between tool calls: configuration and files are read
    again on every request.

    Args:
        config_store: Store holding the application settings
        text_base_path: Directory with the text documents
        pdf_base_path: Directory with the PDF documents
        file_prefix: Document name prefix
        base_url: Prefix of the URLs built for documents and icons

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="agreedisclaimer",
    )

    def aggregator_for(lang: Optional[str]):
        user_lang = lang or read_default_lang(config_store)
        return build_aggregator(
            config_store,
            text_base_path,
            pdf_base_path,
            FixedUserLanguage(user_lang),
            file_prefix=file_prefix,
            base_url=base_url,
            catalog=catalog_for(user_lang),
        )

    @mcp.tool()
    def get_settings(
        get_file_contents: bool = True,
        is_admin_form: bool = False,
        lang: Optional[str] = None,
    ) -> str:
        """Get all the disclaimer settings.

        Args:
            get_file_contents: Whether to include the text file contents
            is_admin_form: Resolve every document for the configured default
                language without falling back to other languages
            lang: Language of the current user (defaults to the configured
                default language)

        Returns:
            JSON document with the settings and the resolved files
        """
        settings = aggregator_for(lang).get_settings(get_file_contents, is_admin_form)
        return json.dumps(settings.to_dict(), ensure_ascii=False)

    @mcp.tool()
    def get_files(
        is_admin_form: bool = False,
        default_lang: Optional[str] = None,
        lang: Optional[str] = None,
    ) -> str:
        """Get the text and PDF disclaimer files shown on the login page.

        Args:
            is_admin_form: Disable language fallback
            default_lang: Override of the configured default language
            lang: Language of the current user

        Returns:
            JSON document with the text file (including its content) and
            the PDF file
        """
        files = aggregator_for(lang).get_files(is_admin_form, default_lang)
        return json.dumps(files.to_dict(), ensure_ascii=False)

    return mcp
