"""
API routes for the Media Transcript Assistant.
"""

import json
import os
import shutil
import traceback
import uuid
from typing import Optional, Tuple

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from transcript_assistant.api.schemas import (
    TranscribeJSONRequest,
    TranscribeResponse,
    QARequest,
    QAResponse,
    ExportRequest,
    ErrorResponse,
)
from transcript_assistant.config import config
from transcript_assistant.core.exporter import export_text
from transcript_assistant.main import transcribe_source, answer_question
from transcript_assistant.utils.error_handling import (
    InvalidYouTubeURLError,
    MissingInputError,
    ServiceError,
    UnsupportedExportFormatError,
    hint_for,
)
from transcript_assistant.utils.helpers import get_file_extension
from transcript_assistant.utils.logger import logging

router = APIRouter(prefix="/api", tags=["transcripts"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


@router.post("/transcribe", response_model=TranscribeResponse, responses=ERROR_RESPONSES)
async def transcribe(request: Request):
    """
    Transcribe a YouTube video or an uploaded audio/video file.

    - Multipart form: `audio` file field and/or `youtubeUrl` text field
    - JSON body: `{"youtubeUrl": "..."}`
    - A YouTube URL takes precedence over an uploaded file
    """
    youtube_url, uploaded_path = await _read_transcribe_input(request)
    request_id = str(uuid.uuid4())

    try:
        result = await run_in_threadpool(
            transcribe_source,
            youtube_url=youtube_url,
            uploaded_path=uploaded_path,
            request_id=request_id,
        )
    except (MissingInputError, InvalidYouTubeURLError):
        raise
    except Exception as e:
        logging.error(f"/api/transcribe error: {str(e)}")
        logging.error(traceback.format_exc())
        details = str(e) or e.__class__.__name__
        raise ServiceError(details, error="Transcription failed", status_code=500,
                           hint=hint_for(details))

    return TranscribeResponse(id=result.id, text=result.text, transcription=result.transcription)


@router.post("/qa", response_model=QAResponse, responses=ERROR_RESPONSES)
async def ask_question(qa_request: QARequest):
    """Answer a question based on the provided transcript."""
    if not qa_request.question or not qa_request.transcript:
        raise ServiceError(error="Missing 'question' or 'transcript' in body.", status_code=400)

    try:
        answer = await run_in_threadpool(answer_question, qa_request.question, qa_request.transcript)
    except Exception as e:
        logging.error(f"/api/qa error: {str(e)}")
        logging.error(traceback.format_exc())
        raise ServiceError(str(e), error="QA failed", status_code=500)

    return QAResponse(answer=answer)


@router.post("/export", responses=ERROR_RESPONSES)
async def export(export_request: ExportRequest):
    """Export text as a txt, json, csv, pdf or docx download."""
    if not export_request.type or not export_request.content:
        raise ServiceError(error="Missing 'type' or 'content'", status_code=400)

    try:
        document = await run_in_threadpool(
            export_text, export_request.type, export_request.content, export_request.filename
        )
    except UnsupportedExportFormatError:
        raise
    except Exception as e:
        logging.error(f"/api/export error: {str(e)}")
        logging.error(traceback.format_exc())
        raise ServiceError(str(e), error="Export failed", status_code=500)

    return Response(
        content=document.body,
        media_type=document.media_type,
        headers={"Content-Disposition": document.content_disposition},
    )


# Helper functions
async def _read_transcribe_input(request: Request) -> Tuple[Optional[str], Optional[str]]:
    """Return the YouTube URL and the saved upload path from a transcribe request."""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        youtube_url = form.get("youtubeUrl")
        upload = form.get("audio")
        uploaded_path = None
        if isinstance(upload, UploadFile) and upload.filename:
            uploaded_path = await run_in_threadpool(save_upload, upload)
        if not isinstance(youtube_url, str):
            youtube_url = None
        return (youtube_url or "").strip() or None, uploaded_path

    raw = await request.body()
    try:
        body = TranscribeJSONRequest.model_validate(json.loads(raw) if raw else {})
    except (ValueError, ValidationError):
        body = TranscribeJSONRequest()
    return (body.youtubeUrl or "").strip() or None, None


def save_upload(upload: UploadFile, tmp_dir: Optional[str] = None) -> str:
    """Save an uploaded file as <tmp>/<uuid><ext> and return its path."""
    tmp_dir = str(tmp_dir or config.TMP_DIR)
    os.makedirs(tmp_dir, exist_ok=True)

    ext = get_file_extension(upload.filename or "", default=".wav")
    path = os.path.join(tmp_dir, f"{uuid.uuid4()}{ext}")
    with open(path, "wb") as f:
        shutil.copyfileobj(upload.file, f)

    logging.info(f"Saved upload {upload.filename} to {path}")
    return path
