"""
Configuration for pytest tests.
"""

import os
import pytest
from pathlib import Path

# Settings are read when the package is imported, so set them first
os.environ.setdefault("GROQ_API_KEY", "test_api_key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("ENABLE_YTDLP_FALLBACK", "true")

from transcript_assistant.config import config  # noqa: E402


@pytest.fixture
def tmp_dir(tmp_path, monkeypatch):
    """Point the application's temp directory at a per-test directory."""
    work_dir = tmp_path / "tmp"
    work_dir.mkdir()
    monkeypatch.setattr(config, "TMP_DIR", work_dir)
    return work_dir


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture
def media_file(tmp_dir) -> Path:
    """A fake uploaded media file inside the temp directory."""
    path = tmp_dir / "upload.mp3"
    path.write_bytes(b"ID3 fake audio data")
    return path


@pytest.fixture
def wav_file(tmp_path) -> Path:
    """A fake converted WAV file."""
    path = tmp_path / "audio.wav"
    path.write_bytes(b"RIFF fake wav data")
    return path
