"""
Module for converting media files to the WAV format expected by Whisper.
"""

import os
from typing import Optional

import ffmpeg

from transcript_assistant.models.schemas import ConversionConfig
from transcript_assistant.utils.error_handling import ConversionError
from transcript_assistant.utils.logger import logging


class AudioConverter:
    """Convert any audio/video file to mono 16 kHz PCM WAV with ffmpeg."""

    def __init__(self, conversion_config: Optional[ConversionConfig] = None):
        self.conversion_config = conversion_config or ConversionConfig()

    def convert_to_wav(self, input_path: str, output_path: str) -> str:
        """
        Convert a media file to WAV.

        Args:
            input_path: Path of the downloaded or uploaded media file
            output_path: Path of the WAV file to write (overwritten if present)

        Returns:
            output_path
        """
        if not os.path.isfile(input_path):
            raise FileNotFoundError(f"Media file not found at {input_path}")

        cfg = self.conversion_config
        logging.info(f"Converting {input_path} to {cfg.container} ({cfg.sample_rate} Hz, {cfg.channels} ch)")

        stream = (
            ffmpeg
            .input(input_path)
            .output(
                output_path,
                vn=None,
                sn=None,
                ac=cfg.channels,
                ar=cfg.sample_rate,
                f=cfg.container,
                acodec=cfg.audio_codec,
            )
            .overwrite_output()
        )

        try:
            stream.run(cmd=cfg.ffmpeg_binary, capture_stdout=True, capture_stderr=True)
        except ffmpeg.Error as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            # Last lines hold the actual error, the rest is the banner
            tail = "\n".join(stderr.splitlines()[-5:])
            raise ConversionError(f"ffmpeg failed to convert {os.path.basename(input_path)}: {tail}") from e
        except FileNotFoundError as e:
            raise ConversionError(f"ffmpeg binary not found: {cfg.ffmpeg_binary}") from e

        logging.info(f"Conversion complete: {output_path}")
        return output_path
