"""Default implementations of the collaborator protocols."""

from agreedisclaimer.adapters.catalog import GERMAN_MESSAGES, StaticCatalog
from agreedisclaimer.adapters.diagnostics import LoggingDiagnosticsSink
from agreedisclaimer.adapters.url_builder import PrefixUrlBuilder
from agreedisclaimer.adapters.user_language import FixedUserLanguage

__all__ = [
    "GERMAN_MESSAGES",
    "FixedUserLanguage",
    "LoggingDiagnosticsSink",
    "PrefixUrlBuilder",
    "StaticCatalog",
]
