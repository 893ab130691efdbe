"""Exceptions raised by AgreeDisclaimer.

Missing or unreadable documents are never raised; they are reported
through ``FileInfo.error``.
"""


class AgreeDisclaimerError(Exception):
    """Base exception for AgreeDisclaimer errors"""
    pass


class ConfigValueError(AgreeDisclaimerError):
    """Raised when a stored configuration value cannot be parsed"""

    def __init__(self, key: str, value: str, expected: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for {key}: {value!r} (expected {expected})")


class InvalidModelError(AgreeDisclaimerError):
    """Raised when a result record is built with inconsistent fields"""
    pass
