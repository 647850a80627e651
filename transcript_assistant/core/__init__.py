"""
Core functionality for the transcript assistant.

This package contains modules for downloading YouTube audio, converting
media to WAV, transcribing audio, answering questions about transcripts,
and exporting text documents.
"""
