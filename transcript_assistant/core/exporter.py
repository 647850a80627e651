"""
Module for exporting transcripts and answers as downloadable documents.
"""

import csv
import io
import json
import re
from typing import Optional, Union
from xml.sax.saxutils import escape

from docx import Document as DocxDocument
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from transcript_assistant.models.schemas import ExportFormat, ExportedDocument
from transcript_assistant.utils.error_handling import UnsupportedExportFormatError
from transcript_assistant.utils.helpers import sanitize_filename
from transcript_assistant.utils.logger import logging


DEFAULT_BASENAME = "export"

MEDIA_TYPES = {
    ExportFormat.TXT: "text/plain; charset=utf-8",
    ExportFormat.JSON: "application/json",
    ExportFormat.CSV: "text/csv; charset=utf-8",
    ExportFormat.PDF: "application/pdf",
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

PDF_MARGIN = 40


def split_lines(content: str):
    return re.split(r"\r?\n", content)


def _to_txt(content: str, title: str) -> bytes:
    return content.encode("utf-8")


def _to_json(content: str, title: str) -> bytes:
    return json.dumps({"content": content}, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def _to_csv(content: str, title: str) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for line in split_lines(content):
        writer.writerow([line])
    # One row per line, no trailing newline
    return buffer.getvalue().rstrip("\n").encode("utf-8")


def _to_pdf(content: str, title: str) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        leftMargin=PDF_MARGIN,
        rightMargin=PDF_MARGIN,
        topMargin=PDF_MARGIN,
        bottomMargin=PDF_MARGIN,
        title=title,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle("ExportTitle", parent=styles["Normal"], fontSize=16, leading=20)
    body_style = ParagraphStyle("ExportBody", parent=styles["Normal"], fontSize=12, leading=15)

    story = [Paragraph(f"<u>{escape(title)}</u>", title_style), Spacer(1, 12)]
    for line in split_lines(content):
        if line.strip():
            story.append(Paragraph(escape(line), body_style))
        else:
            story.append(Spacer(1, 12))

    doc.build(story)
    return buffer.getvalue()


def _to_docx(content: str, title: str) -> bytes:
    document = DocxDocument()
    for line in split_lines(content):
        document.add_paragraph(line)

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


SERIALIZERS = {
    ExportFormat.TXT: _to_txt,
    ExportFormat.JSON: _to_json,
    ExportFormat.CSV: _to_csv,
    ExportFormat.PDF: _to_pdf,
    ExportFormat.DOCX: _to_docx,
}


def parse_export_format(export_type: Union[str, ExportFormat]) -> ExportFormat:
    """Map a requested type to an ExportFormat or raise UnsupportedExportFormatError."""
    if isinstance(export_type, ExportFormat):
        return export_type
    try:
        return ExportFormat(str(export_type).strip().lower())
    except ValueError:
        raise UnsupportedExportFormatError(f"Unsupported export type: {export_type}")


def export_text(
    export_type: Union[str, ExportFormat], content: str, filename: Optional[str] = None
) -> ExportedDocument:
    """
    Serialize plain text into the requested document format.

    Args:
        export_type: One of txt, json, csv, pdf, docx
        content: Text to export
        filename: Base name of the download, without extension (defaults to 'export')

    Returns:
        ExportedDocument with the body, media type and download filename
    """
    fmt = parse_export_format(export_type)
    base = sanitize_filename(filename) if filename else DEFAULT_BASENAME
    base = base or DEFAULT_BASENAME

    body = SERIALIZERS[fmt](content, base)
    logging.info(f"Exported {len(content)} characters as {fmt.value} ({len(body)} bytes)")

    return ExportedDocument(
        body=body,
        media_type=MEDIA_TYPES[fmt],
        filename=f"{base}.{fmt.value}",
    )
