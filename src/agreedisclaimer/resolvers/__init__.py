"""Localized document resolution."""

from agreedisclaimer.resolvers.file_resolver import FileResolver

__all__ = ["FileResolver"]
