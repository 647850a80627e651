"""
Module for transcribing audio files using Groq's API.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional

from groq import Groq

from transcript_assistant.models.schemas import TranscriptionConfig
from transcript_assistant.utils.logger import logging
from transcript_assistant.config import config


class AudioTranscriber:
    """Class to handle audio transcription operations."""

    def __init__(
        self, transcribe_config: Optional[TranscriptionConfig] = None, api_key: Optional[str] = None
    ):
        """
        Initialize the transcriber with API key.

        Args:
            transcribe_config: Whisper request settings (defaults to TranscriptionConfig())
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.transcribe_config = transcribe_config or TranscriptionConfig()
        self.api_key = api_key or os.getenv("GROQ_API_KEY") or config.GROQ_API_KEY
        if not self.api_key:
            raise ValueError(
                "Groq API key is required. Set it in .env file or pass directly."
            )

        self.client = Groq(api_key=self.api_key)

    def transcribe(self, wav_path: str) -> Dict[str, Any]:
        """
        Transcribe a WAV file.

        Args:
            wav_path: Path to the converted audio file

        Returns:
            The provider's verbose JSON response as a dict
        """
        if not os.path.exists(wav_path) or not os.path.isfile(wav_path):
            raise FileNotFoundError(f"Audio file not found at {wav_path}")

        audio_file_path = Path(wav_path)
        cfg = self.transcribe_config

        logging.info(f"Transcribing audio file: {wav_path} with {cfg.model}")

        with open(wav_path, "rb") as audio_file:
            transcription = self.client.audio.transcriptions.create(
                file=(audio_file_path.name, audio_file.read()),
                model=cfg.model,
                prompt=cfg.prompt,
                response_format=cfg.response_format,
                timestamp_granularities=cfg.timestamp_granularities,
                language=cfg.language,
                temperature=cfg.temperature,
            )

        if hasattr(transcription, "model_dump_json"):
            result = json.loads(transcription.model_dump_json())
        elif isinstance(transcription, dict):
            result = transcription
        else:
            result = {"text": str(transcription)}

        logging.info(f"Transcription complete ({len(result.get('text') or '')} characters).")
        return result

    @staticmethod
    def get_transcript_text(transcription: Dict[str, Any]) -> str:
        """Return the plain transcript text from a transcription response."""
        return (transcription or {}).get("text") or ""
