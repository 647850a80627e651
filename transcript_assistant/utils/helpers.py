"""
Helper utility functions for the transcript assistant.
"""

import html as html_lib
import re
from pathlib import Path


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a string to be used as a filename.

    Args:
        filename: The filename to sanitize

    Returns:
        Sanitized filename
    """
    # Remove invalid characters, including header separators
    sanitized = re.sub(r'[\\/*?:"<>|;,\r\n\t]', "_", filename)
    # Replace spaces with underscores
    sanitized = sanitized.replace(" ", "_")
    # Limit length
    if len(sanitized) > 100:
        sanitized = sanitized[:100]
    return sanitized


def get_file_extension(filepath: str, default: str = "") -> str:
    """
    Get the extension of a file, including the dot.

    Args:
        filepath: Path to the file
        default: Value returned when the file has no extension

    Returns:
        File extension (e.g. '.mp3') or the default
    """
    return Path(filepath).suffix or default


def markdown_to_html(md: str) -> str:
    """
    Convert the small markdown subset produced by the QA prompt to HTML.

    Handles headings up to level three, bold text, dash bullets,
    numbered items and paragraph breaks. The input is escaped first, so any
    markup in the source shows up as text.
    """
    html = html_lib.escape(md, quote=False)
    html = re.sub(r"^###\s?(.*)$", r"<h3>\1</h3>", html, flags=re.MULTILINE)
    html = re.sub(r"^##\s?(.*)$", r"<h2>\1</h2>", html, flags=re.MULTILINE)
    html = re.sub(r"^#\s?(.*)$", r"<h1>\1</h1>", html, flags=re.MULTILINE)
    html = re.sub(r"\*\*(.*?)\*\*", r"<strong>\1</strong>", html)
    html = re.sub(r"\n-\s(.*)", r"<ul><li>\1</li></ul>", html)
    html = re.sub(r"\n\d+\.\s(.*)", r"<ol><li>\1</li></ol>", html)
    html = re.sub(r"\n{2,}", "<br/>", html)
    return html

