"""
Data models for the transcript assistant.
"""
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, field_validator
from transcript_assistant.config import config


class YouTubeDownloadConfig(BaseModel):
    """Configuration for YouTube download operations."""
    url: str
    output_filename: Optional[str] = None
    output_directory: str = str(config.TMP_DIR)
    enable_fallback: bool = config.ENABLE_YTDLP_FALLBACK

    @field_validator('url')
    def strip_url(cls, v):
        return v.strip()


class YouTubeMedia(BaseModel):
    """Model to store YouTube media metadata and file paths."""
    video_id: str = ""
    title: str = ""
    author: str = ""

    model_config = {"from_attributes": True}


class ConversionConfig(BaseModel):
    """ffmpeg output settings for the transcription input."""
    channels: int = 1
    sample_rate: int = 16000
    audio_codec: str = "pcm_s16le"
    container: str = "wav"
    ffmpeg_binary: str = config.FFMPEG_BINARY


class TranscriptionConfig(BaseModel):
    """Configuration for transcription operations."""
    model: str = config.DEFAULT_TRANSCRIPTION_MODEL
    language: Optional[str] = "en"
    prompt: Optional[str] = "Transcribe clearly with correct spelling."
    response_format: str = "verbose_json"
    temperature: float = 0.0
    timestamp_granularities: List[str] = Field(default_factory=lambda: ["word", "segment"])


class QAConfig(BaseModel):
    """Configuration for transcript question answering."""
    model: str = config.DEFAULT_QA_MODEL
    model_provider: str = "groq"
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class TranscriptResult(BaseModel):
    """Result of a single transcription request."""
    id: str
    text: str = ""
    transcription: Dict[str, Any] = Field(default_factory=dict)


class ExportFormat(str, Enum):
    """Document formats supported by the exporter."""
    TXT = "txt"
    JSON = "json"
    CSV = "csv"
    PDF = "pdf"
    DOCX = "docx"


class ExportedDocument(BaseModel):
    """Serialized export ready to be sent as a download."""
    body: bytes
    media_type: str
    filename: str

    @property
    def content_disposition(self) -> str:
        return f"attachment; filename={self.filename}"
