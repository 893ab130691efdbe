"""Configuration boundary and settings aggregation."""

from agreedisclaimer.settings.aggregator import SettingsAggregator
from agreedisclaimer.settings.config import (
    AppConfig,
    ConfigKeys,
    check_value,
    max_text_bytes,
    parse_bool,
    parse_size_mb,
    read_default_lang,
    read_max_text_size_mb,
)

__all__ = [
    "AppConfig",
    "ConfigKeys",
    "SettingsAggregator",
    "check_value",
    "max_text_bytes",
    "parse_bool",
    "parse_size_mb",
    "read_default_lang",
    "read_max_text_size_mb",
]
