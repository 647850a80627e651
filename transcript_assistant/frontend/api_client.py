"""
API client for communicating with the Media Transcript Assistant backend.
"""

import mimetypes
import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin
from transcript_assistant.config import config


class ApiError(Exception):
    """Raised when the backend answers with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Client for interacting with the Media Transcript Assistant API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: int = 900):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a response (transcription can be slow)
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def _raise_for_error(response: requests.Response, fallback: str):
        """Raise ApiError with 'error: details - hint' built from the JSON error body."""
        if response.ok:
            return
        try:
            data = response.json()
        except ValueError:
            data = {}

        message = data.get("error") or fallback
        if data.get("details"):
            message += f": {data['details']}"
        if data.get("hint"):
            message += f" - {data['hint']}"
        raise ApiError(message, response.status_code)

    def transcribe_youtube(self, url: str) -> Dict[str, Any]:
        """
        Transcribe a YouTube video.

        Args:
            url: YouTube video URL

        Returns:
            Dictionary with id, text and the full transcription
        """
        response = requests.post(
            self._url("transcribe"),
            json={"youtubeUrl": url},
            timeout=self.timeout,
        )
        self._raise_for_error(response, "Transcription failed")
        return response.json()

    def transcribe_file(self, filename: str, data: bytes, mime_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Upload and transcribe an audio or video file.

        Args:
            filename: Original file name (its extension is kept server side)
            data: File contents
            mime_type: Content type of the file (guessed from the name if None)

        Returns:
            Dictionary with id, text and the full transcription
        """
        mime_type = mime_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"
        response = requests.post(
            self._url("transcribe"),
            files={"audio": (filename, data, mime_type)},
            timeout=self.timeout,
        )
        self._raise_for_error(response, "Transcription failed")
        return response.json()

    def ask_question(self, question: str, transcript: str) -> str:
        """
        Ask a question about a transcript.

        Returns:
            Markdown answer
        """
        response = requests.post(
            self._url("qa"),
            json={"question": question, "transcript": transcript},
            timeout=self.timeout,
        )
        self._raise_for_error(response, "QA failed")
        return response.json().get("answer", "")

    def export(self, export_type: str, content: str, filename: str = "export") -> bytes:
        """
        Export text in the given format.

        Returns:
            The document bytes
        """
        response = requests.post(
            self._url("export"),
            json={"type": export_type, "content": content, "filename": filename},
            timeout=self.timeout,
        )
        self._raise_for_error(response, "Export failed")
        return response.content
