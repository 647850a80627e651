"""
YouTube audio downloader module.

pytubefix is tried first. When it fails, yt-dlp is used as a fallback if
enabled.
"""

import os
import re
import time
from pathlib import Path
from typing import Optional

import yt_dlp
from pytubefix import YouTube
from pytubefix.exceptions import RegexMatchError

from transcript_assistant.models.schemas import YouTubeDownloadConfig, YouTubeMedia
from transcript_assistant.utils.error_handling import (
    DownloadError,
    InvalidYouTubeURLError,
    SignatureChangeError,
    safe_unlink,
)
from transcript_assistant.utils.logger import logging


YOUTUBE_URL_PATTERNS = [
    r"^(?:https?://)?(?:www\.|m\.|music\.)?youtube\.com/watch\?(?:.*&)?v=([0-9A-Za-z_-]{11})",
    r"^(?:https?://)?(?:www\.|m\.)?youtube\.com/(?:shorts|embed|live|v)/([0-9A-Za-z_-]{11})",
    r"^(?:https?://)?(?:www\.)?youtube-nocookie\.com/embed/([0-9A-Za-z_-]{11})",
    r"^(?:https?://)?youtu\.be/([0-9A-Za-z_-]{11})",
]

# Messages pytubefix produces when YouTube changes its player code
DECIPHER_ERROR_PATTERNS = [
    r"could not extract functions",
    r"could not find match for",
    r"get_throttling_function",
    r"signature (?:function|cipher)",
]


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL."""
    for pattern in YOUTUBE_URL_PATTERNS:
        match = re.search(pattern, url.strip())
        if match:
            return match.group(1)
    return None


def validate_youtube_url(url: str) -> str:
    """Return the video ID or raise InvalidYouTubeURLError."""
    video_id = extract_video_id(url or "")
    if not video_id:
        raise InvalidYouTubeURLError()
    return video_id


def is_decipher_error(error: Exception) -> bool:
    """Check whether a pytubefix failure comes from a signature change."""
    if isinstance(error, RegexMatchError):
        return True
    message = str(error)
    return any(re.search(p, message, re.IGNORECASE) for p in DECIPHER_ERROR_PATTERNS)


class YouTubeDownloader:
    """Class to handle downloading YouTube audio."""

    def __init__(self, config: YouTubeDownloadConfig):
        """
        Initialize the YouTube downloader with configuration.

        Args:
            config: Configuration for download operations

        Raises:
            InvalidYouTubeURLError: If the URL is not a YouTube video URL
        """
        self.video_id = validate_youtube_url(config.url)
        self.config = config

    def get_media_info(self) -> YouTubeMedia:
        """Extract metadata from YouTube video."""
        yt = YouTube(self.config.url)
        return YouTubeMedia(
            video_id=yt.video_id,
            title=yt.title,
            author=yt.author
        )

    def _base_filename(self) -> str:
        if self.config.output_filename:
            return self.config.output_filename
        return f"{int(time.time())}_{self.video_id}"

    def _download_with_pytubefix(self, base_filename: str) -> str:
        yt = YouTube(self.config.url)
        audio_stream = yt.streams.filter(only_audio=True).order_by('abr').last()
        if audio_stream is None:
            raise DownloadError(f"No audio stream available for {self.config.url}")

        filename = f"{base_filename}.{audio_stream.subtype or 'mp4'}"
        output_path = os.path.join(self.config.output_directory, filename)
        logging.info(f"Downloading audio with pytubefix: {yt.title}")
        try:
            return audio_stream.download(
                output_path=self.config.output_directory,
                filename=filename,
            )
        except Exception:
            safe_unlink(output_path)
            raise

    def _download_with_ytdlp(self, base_filename: str) -> str:
        output_dir = Path(self.config.output_directory)
        ydl_opts = {
            "format": "bestaudio/best",
            "outtmpl": str(output_dir / f"{base_filename}.%(ext)s"),
            "postprocessors": [{
                "key": "FFmpegExtractAudio",
                "preferredcodec": "mp3",
                "preferredquality": "0",
            }],
            "nocheckcertificate": True,
            "prefer_free_formats": True,
            "noplaylist": True,
            "no_warnings": True,
            "quiet": True,
        }

        logging.info(f"Downloading audio with yt-dlp: {self.config.url}")
        with yt_dlp.YoutubeDL(ydl_opts) as ydl:
            ydl.download([self.config.url])

        produced = sorted(
            p for p in output_dir.iterdir()
            if p.name.startswith(f"{base_filename}.") and not p.name.endswith(".part")
        )
        if not produced:
            raise DownloadError("yt-dlp did not produce an output file")
        return str(produced[0])

    def _remove_partial_files(self, base_filename: str):
        for path in Path(self.config.output_directory).glob(f"{base_filename}.*"):
            safe_unlink(str(path))

    def download_audio(self) -> str:
        """
        Download the audio track and return the file path.

        Returns:
            Path to the downloaded audio file

        Raises:
            SignatureChangeError: pytubefix hit a player change and the fallback is disabled
            DownloadError: every enabled download method failed
        """
        os.makedirs(self.config.output_directory, exist_ok=True)
        base_filename = self._base_filename()

        try:
            return self._download_with_pytubefix(base_filename)
        except Exception as e:
            message = str(e) or e.__class__.__name__
            decipher_issue = is_decipher_error(e)
            logging.warning(f"pytubefix download failed (decipher issue: {decipher_issue}): {message}")

            if not self.config.enable_fallback:
                if decipher_issue:
                    raise SignatureChangeError(
                        "pytubefix failed to download (signature change). Upgrade pytubefix "
                        "or enable the yt-dlp fallback with ENABLE_YTDLP_FALLBACK=true."
                    ) from e
                raise DownloadError(f"YouTube download failed: {message}") from e

        try:
            return self._download_with_ytdlp(base_filename)
        except Exception as e:
            logging.error(f"yt-dlp fallback failed: {e}")
            self._remove_partial_files(base_filename)
            raise DownloadError(f"yt-dlp fallback failed: {e}") from e

