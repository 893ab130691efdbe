"""Aggregate settings records returned to the admin and login callers."""

from dataclasses import dataclass
from typing import Any, Optional

from agreedisclaimer.exceptions import InvalidModelError
from agreedisclaimer.models.file_info import FileInfo


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class DocumentSettings:
    """Feature flag, base directory and resolved file for one document type."""

    enabled: bool
    base_path: str
    file: Optional[FileInfo] = None  # None when the document was not resolved

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"value": _flag(self.enabled), "basePath": self.base_path}
        if self.file is not None:
            data["file"] = self.file.to_dict()
        return data


@dataclass(frozen=True)
class Settings:
    """Active configuration plus resolution results for one call."""

    app_id: str
    default_lang: str
    max_text_size_mb: float
    file_prefix: str
    user_lang: str
    pdf_icon_url: str
    text: DocumentSettings
    pdf: DocumentSettings

    def __post_init__(self) -> None:
        if not self.default_lang:
            raise InvalidModelError("default_lang must not be empty")
        if self.max_text_size_mb <= 0:
            raise InvalidModelError(
                f"max_text_size_mb must be positive, got {self.max_text_size_mb}"
            )

    @property
    def text_enabled(self) -> bool:
        return self.text.enabled

    @property
    def pdf_enabled(self) -> bool:
        return self.pdf.enabled

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the payload served by the settings endpoint."""
        app_id = self.app_id
        size = self.max_text_size_mb
        return {
            "pdfIcon": self.pdf_icon_url,
            f"{app_id}UserLang": self.user_lang,
            f"{app_id}FilePreffix": self.file_prefix,
            "adminSettings": {
                f"{app_id}DefaultLang": {"value": self.default_lang},
                f"{app_id}MaxTxtFileSize": {
                    "value": str(int(size)) if float(size).is_integer() else str(size)
                },
                f"{app_id}TxtFile": self.text.to_dict(),
                f"{app_id}PdfFile": self.pdf.to_dict(),
            },
        }


@dataclass(frozen=True)
class FilesPayload:
    """Text and PDF file info for the login-time fetch."""

    text: FileInfo
    pdf: FileInfo

    def to_dict(self) -> dict[str, Any]:
        return {"txtFile": self.text.to_dict(), "pdfFile": self.pdf.to_dict()}
