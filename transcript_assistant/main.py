"""
Main entry point for the Media Transcript Assistant.
"""

import os
import shutil
import uuid
import argparse
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from transcript_assistant.models.schemas import (
    YouTubeDownloadConfig,
    TranscriptionConfig,
    TranscriptResult,
)
from transcript_assistant.core.youtube_downloader import YouTubeDownloader
from transcript_assistant.core.audio_converter import AudioConverter
from transcript_assistant.core.transcriber import AudioTranscriber
from transcript_assistant.core.qa import TranscriptQA
from transcript_assistant.core.exporter import export_text
from transcript_assistant.config import config
from transcript_assistant.utils.error_handling import (
    InvalidYouTubeURLError,
    MissingInputError,
    safe_unlink,
)
from transcript_assistant.utils.logger import logging


def transcribe_source(
    youtube_url: Optional[str] = None,
    uploaded_path: Optional[str] = None,
    request_id: Optional[str] = None,
    tmp_dir: Optional[str] = None,
    transcription_config: Optional[TranscriptionConfig] = None,
) -> TranscriptResult:
    """
    Transcribe a YouTube video or an uploaded media file.

    The downloaded file, the converted WAV and the uploaded file are always
    removed before returning, whether transcription succeeded or not.

    Args:
        youtube_url: YouTube video URL (takes precedence over uploaded_path)
        uploaded_path: Path of a media file already saved to the temp directory
        request_id: Identifier for this request's temp files (generated if None)
        tmp_dir: Directory for intermediate files (defaults to config.TMP_DIR)
        transcription_config: Whisper request settings

    Returns:
        TranscriptResult with the request id, text and full transcription
    """
    request_id = request_id or str(uuid.uuid4())
    tmp_dir = str(tmp_dir or config.TMP_DIR)
    os.makedirs(tmp_dir, exist_ok=True)

    downloaded_path = None
    wav_path = None
    try:
        if youtube_url:
            # 1. Download YouTube audio
            download_config = YouTubeDownloadConfig(
                url=youtube_url,
                output_directory=tmp_dir,
                output_filename=request_id,
            )
            downloader = YouTubeDownloader(download_config)
            logging.info(f"[{request_id}] Downloading audio from: {youtube_url}")
            downloaded_path = downloader.download_audio()
            working_input_path = downloaded_path
            logging.info(f"[{request_id}] Download complete: {downloaded_path}")
        elif uploaded_path:
            working_input_path = uploaded_path
        else:
            raise MissingInputError()

        # 2. Convert to WAV 16k mono
        wav_path = os.path.join(tmp_dir, f"{request_id}.wav")
        AudioConverter().convert_to_wav(working_input_path, wav_path)

        # 3. Transcribe via Groq Whisper
        transcriber = AudioTranscriber(transcription_config)
        transcription = transcriber.transcribe(wav_path)

        return TranscriptResult(
            id=request_id,
            text=transcriber.get_transcript_text(transcription),
            transcription=transcription,
        )
    finally:
        safe_unlink(downloaded_path)
        safe_unlink(wav_path)
        safe_unlink(uploaded_path)


def answer_question(question: str, transcript: str) -> str:
    """Answer a question grounded in the transcript."""
    return TranscriptQA().answer(question, transcript)


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Media Transcript Assistant")
    parser.add_argument("source", help="YouTube video URL or path to a local audio/video file")
    parser.add_argument("--question", help="Question to answer from the transcript")
    parser.add_argument("--format", dest="export_format",
                        choices=["txt", "json", "csv", "pdf", "docx"],
                        help="Export the answer (or the transcript if no question) in this format")
    parser.add_argument("--output", help="Output file path for the export")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()
    config.initialize()

    source = args.source
    if os.path.isfile(source):
        # Work on a copy, the pipeline deletes its inputs
        local_copy = Path(config.TMP_DIR) / f"{uuid.uuid4()}{Path(source).suffix or '.wav'}"
        shutil.copyfile(source, local_copy)
        result = transcribe_source(uploaded_path=str(local_copy))
    else:
        try:
            media = YouTubeDownloader(YouTubeDownloadConfig(url=source)).get_media_info()
            print(f"Transcribing '{media.title}' by {media.author}")
        except InvalidYouTubeURLError:
            parser.error(f"{source} is neither a local file nor a YouTube video URL")
        except Exception as e:
            logging.warning(f"Could not fetch video metadata: {e}")
        result = transcribe_source(youtube_url=source)

    print("\n" + "=" * 80)
    print(f"Transcript ({result.id})")
    print("=" * 80)
    print(result.text)

    text_to_export = result.text
    basename = "transcript"
    if args.question:
        answer = answer_question(args.question, result.text)
        print("\n" + "=" * 80)
        print(f"Q: {args.question}")
        print("=" * 80)
        print(answer)
        text_to_export = answer
        basename = "answer"

    if args.export_format:
        document = export_text(args.export_format, text_to_export, basename)
        output_file = Path(args.output) if args.output else Path(document.filename)
        output_file.write_bytes(document.body)
        logging.info(f"Export saved to: {output_file}")


if __name__ == "__main__":
    main()
