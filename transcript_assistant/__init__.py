"""
Media Transcript Assistant.

Transcribes YouTube videos or uploaded media files with Groq Whisper,
answers questions grounded in the transcript, and exports the text
as TXT, JSON, CSV, PDF or DOCX.
"""

from transcript_assistant.config import config

__version__ = config.APP_VERSION
