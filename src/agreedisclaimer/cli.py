"""CLI entry point for AgreeDisclaimer."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Literal, Optional, cast

from agreedisclaimer import APP_ID, FILE_PREFIX
from agreedisclaimer.adapters import FixedUserLanguage
from agreedisclaimer.exceptions import ConfigValueError
from agreedisclaimer.factory import build_aggregator, catalog_for
from agreedisclaimer.settings import AppConfig, ConfigKeys, check_value, read_default_lang
from agreedisclaimer.storage import SqliteConfigStore

logger = logging.getLogger(__name__)

# Short names accepted by the "set" command
SETTING_ALIASES = {
    "text-enabled": "text_file",
    "pdf-enabled": "pdf_file",
    "default-lang": "default_lang",
    "max-text-size": "max_text_size",
}


def _open_store(config: str) -> SqliteConfigStore:
    store = SqliteConfigStore(config)
    store.initialize()
    return store


def _print_json(data: dict[str, Any]) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def init_config(config: str) -> None:
    """Create the configuration database and show the effective settings.

    Args:
        config: Path to the SQLite configuration file
    """
    store = _open_store(config)
    app_config = AppConfig.load(store)
    logger.info(f"Configuration ready at {config}")
    logger.info(f"  text enabled:  {app_config.text_enabled}")
    logger.info(f"  pdf enabled:   {app_config.pdf_enabled}")
    logger.info(f"  default lang:  {app_config.default_lang}")
    logger.info(f"  max text size: {app_config.max_text_size_mb} MB")


def set_value(config: str, name: str, value: str) -> None:
    """Store one setting.

    Args:
        config: Path to the SQLite configuration file
        name: Setting alias (e.g. 'default-lang') or full key
        value: Value to store
    """
    keys = ConfigKeys(APP_ID)
    key = getattr(keys, SETTING_ALIASES[name]) if name in SETTING_ALIASES else name
    # Raises ConfigValueError before anything is written
    check_value(key, value, APP_ID)

    store = _open_store(config)
    store.set_value(APP_ID, key, value)
    logger.info(f"{key} = {value}")


def show_settings(
    config: str,
    txt_dir: str,
    pdf_dir: str,
    prefix: str,
    lang: Optional[str],
    admin: bool,
    no_content: bool,
) -> None:
    """Print the settings payload."""
    store = _open_store(config)
    user_lang = lang or read_default_lang(store)
    aggregator = build_aggregator(
        store,
        txt_dir,
        pdf_dir,
        FixedUserLanguage(user_lang),
        file_prefix=prefix,
        catalog=catalog_for(user_lang),
    )
    settings = aggregator.get_settings(
        include_text_content=not no_content, is_admin_context=admin
    )
    _print_json(settings.to_dict())


def show_files(
    config: str,
    txt_dir: str,
    pdf_dir: str,
    prefix: str,
    lang: Optional[str],
    admin: bool,
    default_lang: Optional[str],
) -> None:
    """Print the files payload."""
    store = _open_store(config)
    user_lang = lang or read_default_lang(store)
    aggregator = build_aggregator(
        store,
        txt_dir,
        pdf_dir,
        FixedUserLanguage(user_lang),
        file_prefix=prefix,
        catalog=catalog_for(user_lang),
    )
    _print_json(aggregator.get_files(admin, default_lang).to_dict())


def serve(config: str, txt_dir: str, pdf_dir: str, prefix: str, transport: str = "stdio") -> None:
    """Start MCP server for the disclaimer settings.

    Args:
        config: Path to the SQLite configuration file
        txt_dir: Directory with the text documents
        pdf_dir: Directory with the PDF documents
        prefix: Document name prefix
        transport: Transport protocol (stdio or sse)
    """
    if not Path(config).exists():
        logger.error(f"Configuration not found: {config}")
        logger.error("Create it with: agreedisclaimer init-config")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from agreedisclaimer.server import create_mcp_server

    logger.info(f"Serving disclaimer settings via {transport}")
    mcp = create_mcp_server(SqliteConfigStore(config), txt_dir, pdf_dir, file_prefix=prefix)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def _add_document_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--txt-dir", default="txt", help="Directory of the text files (default: txt)")
    parser.add_argument("--pdf-dir", default="pdf", help="Directory of the PDF files (default: pdf)")
    parser.add_argument(
        "--prefix",
        default=FILE_PREFIX,
        help=f"File name prefix (default: {FILE_PREFIX})",
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="agreedisclaimer",
        description="AgreeDisclaimer - localized disclaimer documents",
    )
    parser.add_argument(
        "--config",
        default="agreedisclaimer.db",
        help="SQLite configuration file (default: agreedisclaimer.db)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # init-config command
    subparsers.add_parser("init-config", help="Create the configuration database")

    # set command
    set_parser = subparsers.add_parser("set", help="Store a configuration value")
    set_parser.add_argument(
        "name",
        help=f"One of {', '.join(SETTING_ALIASES)} or a full configuration key",
    )
    set_parser.add_argument("value", help="Value to store")

    # settings command
    settings_parser = subparsers.add_parser("settings", help="Show the settings payload")
    _add_document_options(settings_parser)
    settings_parser.add_argument("--lang", help="Language of the current user")
    settings_parser.add_argument("--admin", action="store_true", help="Admin form mode")
    settings_parser.add_argument(
        "--no-content", action="store_true", help="Do not include the text contents"
    )

    # files command
    files_parser = subparsers.add_parser("files", help="Show the login files payload")
    _add_document_options(files_parser)
    files_parser.add_argument("--lang", help="Language of the current user")
    files_parser.add_argument("--admin", action="store_true", help="Admin form mode")
    files_parser.add_argument("--default-lang", help="Override the default language")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start MCP server")
    _add_document_options(serve_parser)
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        if args.command == "init-config":
            init_config(args.config)
        elif args.command == "set":
            set_value(args.config, args.name, args.value)
        elif args.command == "settings":
            show_settings(
                args.config,
                args.txt_dir,
                args.pdf_dir,
                args.prefix,
                args.lang,
                args.admin,
                args.no_content,
            )
        elif args.command == "files":
            show_files(
                args.config,
                args.txt_dir,
                args.pdf_dir,
                args.prefix,
                args.lang,
                args.admin,
                args.default_lang,
            )
        elif args.command == "serve":
            serve(args.config, args.txt_dir, args.pdf_dir, args.prefix, args.transport)
    except ConfigValueError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
