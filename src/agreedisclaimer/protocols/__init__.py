"""Protocol definitions for the collaborators the core depends on."""

from agreedisclaimer.protocols.catalog import MessageCatalog
from agreedisclaimer.protocols.config_store import ConfigStore
from agreedisclaimer.protocols.diagnostics import DiagnosticsSink
from agreedisclaimer.protocols.fallback import FallbackProvider
from agreedisclaimer.protocols.url_builder import UrlBuilder
from agreedisclaimer.protocols.user_language import CurrentUserLanguage

__all__ = [
    "ConfigStore",
    "CurrentUserLanguage",
    "DiagnosticsSink",
    "FallbackProvider",
    "MessageCatalog",
    "UrlBuilder",
]
