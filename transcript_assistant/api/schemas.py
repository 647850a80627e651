from pydantic import BaseModel
from typing import Optional, Dict, Any


class TranscribeJSONRequest(BaseModel):
    """JSON body for transcribing a YouTube video."""
    youtubeUrl: Optional[str] = None


class TranscribeResponse(BaseModel):
    """Model for transcription responses."""
    id: str
    text: str
    transcription: Dict[str, Any] = {}


class QARequest(BaseModel):
    """Model for question answering requests."""
    question: Optional[str] = None
    transcript: Optional[str] = None


class QAResponse(BaseModel):
    """Model for question answering responses."""
    answer: str


class ExportRequest(BaseModel):
    """Model for export requests."""
    type: Optional[str] = None
    content: Optional[str] = None
    filename: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body returned by every endpoint."""
    error: str
    details: Optional[str] = None
    hint: Optional[str] = None
