"""
Tests for the YouTube downloader module.
"""

import os
import pytest
from unittest.mock import patch, MagicMock

from transcript_assistant.models.schemas import YouTubeDownloadConfig, YouTubeMedia
from transcript_assistant.core.youtube_downloader import (
    YouTubeDownloader,
    extract_video_id,
    is_decipher_error,
    validate_youtube_url,
)
from transcript_assistant.utils.error_handling import (
    DownloadError,
    InvalidYouTubeURLError,
    SignatureChangeError,
)


@pytest.fixture
def mock_youtube():
    """Fixture to mock the pytubefix YouTube class."""
    with patch('transcript_assistant.core.youtube_downloader.YouTube') as mock_yt:
        # Configure the mock YouTube instance
        mock_yt_instance = mock_yt.return_value
        mock_yt_instance.title = "Test Video"
        mock_yt_instance.author = "Test Author"
        mock_yt_instance.video_id = "V3TUEeB0kW0"

        mock_audio_stream = MagicMock()
        mock_audio_stream.subtype = "mp4"
        mock_yt_instance.streams.filter.return_value.order_by.return_value.last.return_value = mock_audio_stream

        yield mock_yt


@pytest.fixture
def mock_ytdlp():
    """Fixture to mock yt-dlp's YoutubeDL context manager."""
    with patch('transcript_assistant.core.youtube_downloader.yt_dlp.YoutubeDL') as mock_ydl_class:
        yield mock_ydl_class


@pytest.fixture
def download_config(tmp_dir, test_video_url):
    """Fixture to create a download configuration."""
    return YouTubeDownloadConfig(
        url=test_video_url,
        output_directory=str(tmp_dir),
        output_filename="request-1",
        enable_fallback=True,
    )


def _write_file(**kwargs):
    """Side effect for pytubefix Stream.download."""
    output_file = os.path.join(kwargs['output_path'], kwargs['filename'])
    with open(output_file, 'w') as f:
        f.write("Mock audio content")
    return output_file


def _ytdlp_writes(mock_ydl_class, directory, name):
    def fake_download(urls):
        with open(os.path.join(directory, name), "w") as f:
            f.write("Mock mp3 content")
        return 0
    mock_ydl_class.return_value.__enter__.return_value.download.side_effect = fake_download


@pytest.mark.parametrize("url,expected", [
    ("https://www.youtube.com/watch?v=V3TUEeB0kW0", "V3TUEeB0kW0"),
    ("https://youtube.com/watch?feature=share&v=V3TUEeB0kW0", "V3TUEeB0kW0"),
    ("https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R", "V3TUEeB0kW0"),
    ("https://www.youtube.com/shorts/V3TUEeB0kW0", "V3TUEeB0kW0"),
    ("https://www.youtube.com/embed/V3TUEeB0kW0", "V3TUEeB0kW0"),
    ("https://m.youtube.com/watch?v=V3TUEeB0kW0&t=42s", "V3TUEeB0kW0"),
    ("https://vimeo.com/123456", None),
    ("https://www.youtube.com/watch?v=short", None),
    ("not a url", None),
])
def test_extract_video_id(url, expected):
    """Test extracting the video ID from supported and unsupported URLs."""
    assert extract_video_id(url) == expected


def test_validate_youtube_url_rejects_other_sites():
    """Test that non-YouTube URLs raise InvalidYouTubeURLError."""
    with pytest.raises(InvalidYouTubeURLError) as exc_info:
        validate_youtube_url("https://example.com/watch?v=V3TUEeB0kW0")

    assert exc_info.value.status_code == 400
    assert exc_info.value.to_dict() == {"error": "Invalid YouTube URL"}


def test_is_decipher_error():
    """Test recognizing signature-change failures by message."""
    assert is_decipher_error(Exception("Could not extract functions from player"))
    assert is_decipher_error(Exception("get_throttling_function_name: could not find match for multiple"))
    assert not is_decipher_error(Exception("HTTP Error 403: Forbidden"))


def test_get_media_info(mock_youtube, download_config):
    """Test extracting media info from YouTube video."""
    downloader = YouTubeDownloader(download_config)
    media_info = downloader.get_media_info()

    assert isinstance(media_info, YouTubeMedia)
    assert media_info.video_id == "V3TUEeB0kW0"
    assert media_info.title == "Test Video"
    assert media_info.author == "Test Author"


def test_download_audio_with_pytubefix(mock_youtube, mock_ytdlp, download_config, tmp_dir):
    """Test the primary download path."""
    mock_audio_stream = mock_youtube.return_value.streams.filter.return_value.order_by.return_value.last.return_value
    mock_audio_stream.download.side_effect = _write_file

    downloader = YouTubeDownloader(download_config)
    audio_path = downloader.download_audio()

    mock_audio_stream.download.assert_called_once_with(
        output_path=str(tmp_dir), filename="request-1.mp4"
    )
    mock_ytdlp.assert_not_called()
    assert audio_path == os.path.join(str(tmp_dir), "request-1.mp4")
    assert os.path.exists(audio_path)


def test_download_falls_back_to_ytdlp_on_decipher_error(mock_youtube, mock_ytdlp, download_config, tmp_dir):
    """Test that a signature change triggers the yt-dlp fallback."""
    mock_youtube.return_value.streams.filter.side_effect = Exception("Could not extract functions")
    _ytdlp_writes(mock_ytdlp, tmp_dir, "request-1.mp3")

    downloader = YouTubeDownloader(download_config)
    audio_path = downloader.download_audio()

    assert audio_path == str(tmp_dir / "request-1.mp3")
    ydl_opts = mock_ytdlp.call_args[0][0]
    assert ydl_opts["format"] == "bestaudio/best"
    assert ydl_opts["outtmpl"] == str(tmp_dir / "request-1.%(ext)s")
    assert ydl_opts["postprocessors"][0]["preferredcodec"] == "mp3"
    assert ydl_opts["nocheckcertificate"] is True


def test_download_falls_back_to_ytdlp_on_other_error(mock_youtube, mock_ytdlp, download_config, tmp_dir):
    """Test that any pytubefix failure uses the fallback when it is enabled."""
    mock_youtube.return_value.streams.filter.side_effect = Exception("HTTP Error 403: Forbidden")
    _ytdlp_writes(mock_ytdlp, tmp_dir, "request-1.mp3")

    downloader = YouTubeDownloader(download_config)

    assert downloader.download_audio().endswith("request-1.mp3")
    mock_ytdlp.assert_called_once()


def test_partial_pytubefix_file_is_removed(mock_youtube, mock_ytdlp, download_config, tmp_dir):
    """Test that a failed pytubefix download does not leave its file behind."""
    mock_audio_stream = mock_youtube.return_value.streams.filter.return_value.order_by.return_value.last.return_value

    def partial_download(**kwargs):
        _write_file(**kwargs)
        raise Exception("connection reset")

    mock_audio_stream.download.side_effect = partial_download
    _ytdlp_writes(mock_ytdlp, tmp_dir, "request-1.mp3")

    downloader = YouTubeDownloader(download_config)
    downloader.download_audio()

    assert not (tmp_dir / "request-1.mp4").exists()
    assert (tmp_dir / "request-1.mp3").exists()


def test_signature_change_without_fallback(mock_youtube, mock_ytdlp, download_config):
    """Test the error raised for a signature change when yt-dlp is disabled."""
    download_config.enable_fallback = False
    mock_youtube.return_value.streams.filter.side_effect = Exception("Could not extract functions")

    downloader = YouTubeDownloader(download_config)

    with pytest.raises(SignatureChangeError) as exc_info:
        downloader.download_audio()

    assert str(exc_info.value).startswith("pytubefix failed to download (signature change)")
    mock_ytdlp.assert_not_called()


def test_other_error_without_fallback(mock_youtube, mock_ytdlp, download_config):
    """Test that other failures bubble up when yt-dlp is disabled."""
    download_config.enable_fallback = False
    mock_youtube.return_value.streams.filter.side_effect = Exception("Video unavailable")

    downloader = YouTubeDownloader(download_config)

    with pytest.raises(DownloadError, match="YouTube download failed: Video unavailable"):
        downloader.download_audio()


def test_ytdlp_without_output_file(mock_youtube, mock_ytdlp, download_config):
    """Test the error raised when yt-dlp finishes without writing a file."""
    mock_youtube.return_value.streams.filter.side_effect = Exception("Could not extract functions")

    downloader = YouTubeDownloader(download_config)

    with pytest.raises(DownloadError, match="yt-dlp fallback failed: yt-dlp did not produce an output file"):
        downloader.download_audio()


def test_ytdlp_failure(mock_youtube, mock_ytdlp, download_config):
    """Test the error raised when the fallback itself fails."""
    mock_youtube.return_value.streams.filter.side_effect = Exception("Could not extract functions")
    mock_ytdlp.return_value.__enter__.return_value.download.side_effect = Exception("Sign in to confirm")

    downloader = YouTubeDownloader(download_config)

    with pytest.raises(DownloadError, match="yt-dlp fallback failed: Sign in to confirm"):
        downloader.download_audio()


def test_invalid_url_rejected_before_download(mock_youtube, tmp_dir):
    """Test that the downloader validates its URL on construction."""
    config = YouTubeDownloadConfig(url="https://example.com/video", output_directory=str(tmp_dir))

    with pytest.raises(InvalidYouTubeURLError):
        YouTubeDownloader(config)

    mock_youtube.assert_not_called()


def test_ytdlp_failure_removes_partial_files(mock_youtube, mock_ytdlp, download_config, tmp_dir):
    """Test that files written by a failed yt-dlp run are deleted."""
    mock_youtube.return_value.streams.filter.side_effect = Exception("Could not extract functions")
    (tmp_dir / "unrelated.mp3").write_text("keep me")

    def fake_download(urls):
        (tmp_dir / "request-1.webm").write_text("Mock stream")
        (tmp_dir / "request-1.mp3.part").write_text("Mock partial mp3")
        raise Exception("Postprocessing: audio conversion failed")

    mock_ytdlp.return_value.__enter__.return_value.download.side_effect = fake_download

    downloader = YouTubeDownloader(download_config)

    with pytest.raises(DownloadError, match="audio conversion failed"):
        downloader.download_audio()

    assert sorted(p.name for p in tmp_dir.iterdir()) == ["unrelated.mp3"]
