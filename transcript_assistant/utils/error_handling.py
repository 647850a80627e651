"""
Centralized error handling for the application.
"""

import os
from typing import Optional, Dict, Any

from transcript_assistant.utils.logger import logging


SIGNATURE_CHANGE_HINT = (
    "Try: pip install -U pytubefix. If it persists, enable the yt-dlp fallback "
    "(ENABLE_YTDLP_FALLBACK=true, pip install -U yt-dlp) and rerun."
)


class ServiceError(Exception):
    """Base error carrying the HTTP status and the JSON error body."""

    status_code = 500
    error = "Request failed"

    def __init__(self, details: Optional[str] = None, *, error: Optional[str] = None,
                 status_code: Optional[int] = None, hint: Optional[str] = None):
        super().__init__(details or error or self.error)
        self.details = details
        self.hint = hint
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details:
            body["details"] = self.details
        if self.hint:
            body["hint"] = self.hint
        return body


class MissingInputError(ServiceError):
    status_code = 400
    error = "Provide a YouTube URL or upload an audio file."


class InvalidYouTubeURLError(ServiceError, ValueError):
    status_code = 400
    error = "Invalid YouTube URL"


class DownloadError(ServiceError):
    """Raised when every configured download method has failed."""


class SignatureChangeError(DownloadError):
    """pytubefix could not decipher the player signature and no fallback is enabled."""


class ConversionError(ServiceError):
    """ffmpeg could not convert the input to WAV."""


class UnsupportedExportFormatError(ServiceError, ValueError):
    status_code = 400
    error = "Unsupported type"


def hint_for(details: str) -> Optional[str]:
    """Return a remediation hint for known download failures."""
    if "pytubefix failed" in details:
        return SIGNATURE_CHANGE_HINT
    return None


def safe_unlink(file_path: Optional[str]) -> None:
    """Remove a temporary file, logging instead of raising on failure."""
    if not file_path:
        return
    try:
        if os.path.exists(file_path):
            os.remove(file_path)
            logging.debug(f"Removed temporary file: {file_path}")
    except OSError as e:
        logging.warning(f"Failed to remove {file_path}: {e}")
