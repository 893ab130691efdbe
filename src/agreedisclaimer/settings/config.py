"""Typed view over the string values held by the configuration store."""

from dataclasses import dataclass
from typing import Optional

from agreedisclaimer import APP_ID
from agreedisclaimer.exceptions import ConfigValueError
from agreedisclaimer.loaders.content_loader import BYTES_PER_MB
from agreedisclaimer.protocols import ConfigStore

DEFAULT_LANG = "en"
DEFAULT_MAX_TEXT_SIZE_MB = "1"


@dataclass(frozen=True)
class ConfigKeys:
    """Store keys, prefixed with the app id as in existing deployments."""

    app_id: str = APP_ID

    @property
    def text_file(self) -> str:
        return f"{self.app_id}TxtFile"

    @property
    def pdf_file(self) -> str:
        return f"{self.app_id}PdfFile"

    @property
    def default_lang(self) -> str:
        return f"{self.app_id}DefaultLang"

    @property
    def max_text_size(self) -> str:
        return f"{self.app_id}MaxTxtFileSize"


def parse_bool(key: str, raw: str) -> bool:
    """Parse a stored "true"/"false" flag."""
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ConfigValueError(key, raw, "'true' or 'false'")


def parse_size_mb(key: str, raw: str) -> float:
    """Parse a positive size in megabytes ("1", "2.5")."""
    try:
        size = float(raw.strip())
    except ValueError:
        raise ConfigValueError(key, raw, "a number of megabytes") from None
    if not size > 0 or size == float("inf"):
        raise ConfigValueError(key, raw, "a positive number of megabytes")
    return size


def max_text_bytes(size_mb: float) -> int:
    """Convert a size in megabytes to the byte cap used for text reads."""
    return int(size_mb * BYTES_PER_MB)


def _get(store: ConfigStore, app_id: str, key: str, default: str) -> str:
    value: Optional[str] = store.get_value(app_id, key, default)
    return default if value is None else value


def read_default_lang(store: ConfigStore, app_id: str = APP_ID) -> str:
    """Return the configured default language; empty values count as absent."""
    key = ConfigKeys(app_id).default_lang
    return _get(store, app_id, key, DEFAULT_LANG).strip() or DEFAULT_LANG


def read_max_text_size_mb(store: ConfigStore, app_id: str = APP_ID) -> float:
    key = ConfigKeys(app_id).max_text_size
    return parse_size_mb(key, _get(store, app_id, key, DEFAULT_MAX_TEXT_SIZE_MB))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration as read on one call."""

    text_enabled: bool = True
    pdf_enabled: bool = True
    default_lang: str = DEFAULT_LANG
    max_text_size_mb: float = 1.0

    @property
    def max_text_bytes(self) -> int:
        return max_text_bytes(self.max_text_size_mb)

    @classmethod
    def load(cls, store: ConfigStore, app_id: str = APP_ID) -> "AppConfig":
        """Read and parse every setting; absent keys take their defaults.

        Raises:
            ConfigValueError: If a stored value cannot be parsed
        """
        keys = ConfigKeys(app_id)
        return cls(
            text_enabled=parse_bool(
                keys.text_file, _get(store, app_id, keys.text_file, "true")
            ),
            pdf_enabled=parse_bool(
                keys.pdf_file, _get(store, app_id, keys.pdf_file, "true")
            ),
            default_lang=read_default_lang(store, app_id),
            max_text_size_mb=read_max_text_size_mb(store, app_id),
        )


def check_value(key: str, raw: str, app_id: str = APP_ID) -> None:
    """Validate a value about to be stored under ``key``.

    Keys this module does not parse are accepted as-is.

    Raises:
        ConfigValueError: If the value would be rejected on the next read
    """
    keys = ConfigKeys(app_id)
    if key in (keys.text_file, keys.pdf_file):
        parse_bool(key, raw)
    elif key == keys.max_text_size:
        parse_size_mb(key, raw)
