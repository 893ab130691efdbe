"""Data models for AgreeDisclaimer."""

from agreedisclaimer.models.file_info import FileInfo
from agreedisclaimer.models.settings import DocumentSettings, FilesPayload, Settings

__all__ = ["FileInfo", "DocumentSettings", "Settings", "FilesPayload"]
