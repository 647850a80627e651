"""
Tests for the export module.
"""

import io
import json
import pytest
from docx import Document as DocxDocument

from transcript_assistant.core.exporter import export_text, parse_export_format
from transcript_assistant.models.schemas import ExportFormat
from transcript_assistant.utils.error_handling import UnsupportedExportFormatError


CONTENT = 'First line\nSecond "quoted" line\r\nThird line'


def test_export_txt():
    """Test plain text export."""
    document = export_text("txt", "Héllo transcript", "transcript")

    assert document.body == "Héllo transcript".encode("utf-8")
    assert document.media_type == "text/plain; charset=utf-8"
    assert document.filename == "transcript.txt"
    assert document.content_disposition == "attachment; filename=transcript.txt"


def test_export_json():
    """Test JSON export wraps the content."""
    document = export_text("json", "Héllo", "answer")

    assert json.loads(document.body.decode("utf-8")) == {"content": "Héllo"}
    assert document.body == '{"content":"Héllo"}'.encode("utf-8")
    assert document.media_type == "application/json"
    assert document.filename == "answer.json"


def test_export_csv():
    """Test CSV export quotes each line and doubles quotes."""
    document = export_text("csv", CONTENT, "transcript")

    assert document.body.decode("utf-8") == (
        '"First line"\n"Second ""quoted"" line"\n"Third line"'
    )
    assert document.media_type == "text/csv; charset=utf-8"


def test_export_csv_keeps_blank_lines():
    """Test that blank lines become empty quoted rows."""
    document = export_text("csv", "a\n\nb")

    assert document.body.decode("utf-8") == '"a"\n""\n"b"'


def test_export_pdf():
    """Test PDF export produces a PDF document."""
    document = export_text("pdf", CONTENT + "\n\n<b>not markup</b> & more", "transcript")

    assert document.body.startswith(b"%PDF")
    assert document.media_type == "application/pdf"
    assert document.filename == "transcript.pdf"


def test_export_docx():
    """Test DOCX export writes one paragraph per line."""
    document = export_text("docx", CONTENT, "transcript")

    docx = DocxDocument(io.BytesIO(document.body))
    assert [p.text for p in docx.paragraphs] == ["First line", 'Second "quoted" line', "Third line"]
    assert document.media_type == (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )


def test_default_filename():
    """Test the default download name."""
    assert export_text("txt", "text").filename == "export.txt"
    assert export_text("txt", "text", "").filename == "export.txt"


def test_filename_is_sanitized():
    """Test that unsafe characters cannot reach the Content-Disposition header."""
    document = export_text("txt", "text", 'my "notes"; x\r\nSet-Cookie: a')

    assert '"' not in document.filename
    assert ";" not in document.filename
    assert "\r" not in document.filename and "\n" not in document.filename
    assert document.filename.endswith(".txt")


def test_parse_export_format():
    """Test format parsing is case-insensitive."""
    assert parse_export_format("PDF") is ExportFormat.PDF
    assert parse_export_format(ExportFormat.DOCX) is ExportFormat.DOCX


def test_unsupported_format():
    """Test that unknown formats are rejected."""
    with pytest.raises(UnsupportedExportFormatError) as exc_info:
        export_text("xlsx", "text")

    assert exc_info.value.status_code == 400
    assert exc_info.value.error == "Unsupported type"
