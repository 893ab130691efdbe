"""AgreeDisclaimer - localized legal disclaimer resolution."""

APP_ID = "agreedisclaimer"
FILE_PREFIX = "disclaimer"

__version__ = "0.1.0"
