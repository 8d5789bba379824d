import io

import docx
import pytest

from parsing.skills import SkillVocabulary
from services import documents
from services.documents import (
    DecodeError,
    DocumentTooLargeError,
    UnsupportedFormatError,
    decode_to_text,
    parse_document,
    resolve_format,
)

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _docx_bytes() -> bytes:
    document = docx.Document()
    document.add_paragraph("Priya Natarajan")
    document.add_paragraph("priya.n@example.in")
    document.add_paragraph("Skills: Python, Docker")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Phone"
    table.rows[0].cells[1].text = "555-010-4477"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.mark.parametrize("mime, filename, expected", [
    ("application/pdf", None, "pdf"),
    ("text/plain; charset=utf-8", None, "txt"),
    (DOCX_MIME, None, "docx"),
    ("application/octet-stream", "CV.PDF", "pdf"),
    (None, "resume.docx", "docx"),
])
def test_resolve_format(mime, filename, expected):
    assert resolve_format(mime, filename) == expected


def test_unsupported_format():
    with pytest.raises(UnsupportedFormatError):
        decode_to_text(b"data", "image/png", "photo.png")


def test_txt_utf8_and_latin1():
    assert decode_to_text("Zoë Müller".encode("utf-8"), "text/plain") == "Zoë Müller"
    assert decode_to_text("Zoë Müller".encode("latin-1"), "text/plain") == "Zoë Müller"


def test_empty_txt_is_not_an_error():
    assert decode_to_text(b"", "text/plain") == ""


def test_docx_paragraphs_and_tables():
    text = decode_to_text(_docx_bytes(), DOCX_MIME)
    assert text.strip().splitlines()[0] == "Priya Natarajan"
    assert "Phone | 555-010-4477" in text


def test_corrupt_docx():
    with pytest.raises(DecodeError):
        decode_to_text(b"definitely not a zip archive", DOCX_MIME)


def test_corrupt_pdf():
    with pytest.raises(DecodeError):
        decode_to_text(b"this is not a pdf at all", "application/pdf")


def test_too_large(monkeypatch):
    monkeypatch.setattr(documents.config, "MAX_UPLOAD_BYTES", 10)
    with pytest.raises(DocumentTooLargeError):
        decode_to_text(b"x" * 11, "text/plain")


def test_parse_document_end_to_end():
    vocab = SkillVocabulary(["python", "docker", "java"])
    result = parse_document(_docx_bytes(), DOCX_MIME, "priya.docx", vocabulary=vocab)
    assert result.name == "Priya Natarajan"
    assert result.email == "priya.n@example.in"
    assert result.phone == "555-010-4477"
    assert result.skills == ("docker", "python")


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


def _fake_reader(*texts):
    class Reader:
        def __init__(self, stream):
            self.pages = [_FakePage(t) for t in texts]

    return Reader


def _broken_reader(stream):
    raise ValueError("xref table is damaged")


def test_pdf_pypdf_text_is_enough(monkeypatch):
    monkeypatch.setattr(documents, "PdfReader", _fake_reader("a" * 300, "b" * 300))
    monkeypatch.setattr(documents, "_pdfminer_text", lambda data: pytest.fail("pdfminer should not run"))
    assert decode_to_text(b"%PDF-", "application/pdf") == "a" * 300 + "\n" + "b" * 300


def test_pdf_short_text_is_replaced_by_richer_pdfminer_text(monkeypatch):
    monkeypatch.setattr(documents, "PdfReader", _fake_reader("Jane", None))
    monkeypatch.setattr(documents, "_pdfminer_text", lambda data: "Jane Doe\nSkills: Python")
    assert decode_to_text(b"%PDF-", "application/pdf") == "Jane Doe\nSkills: Python"


def test_pdf_short_text_kept_when_pdfminer_is_not_richer(monkeypatch):
    monkeypatch.setattr(documents, "PdfReader", _fake_reader("Jane Doe"))
    monkeypatch.setattr(documents, "_pdfminer_text", lambda data: " \x0c ")
    assert decode_to_text(b"%PDF-", "application/pdf") == "Jane Doe"


def test_pdf_short_text_kept_when_pdfminer_retry_fails(monkeypatch):
    def boom(data):
        raise RuntimeError("pdfminer choked")

    monkeypatch.setattr(documents, "PdfReader", _fake_reader("Jane Doe"))
    monkeypatch.setattr(documents, "_pdfminer_text", boom)
    assert decode_to_text(b"%PDF-", "application/pdf") == "Jane Doe"


def test_pdf_pypdf_failure_falls_back_to_pdfminer(monkeypatch):
    monkeypatch.setattr(documents, "PdfReader", _broken_reader)
    monkeypatch.setattr(documents, "_pdfminer_text", lambda data: "Jane Doe")
    assert decode_to_text(b"%PDF-", "application/pdf") == "Jane Doe"


def test_pdf_both_readers_fail(monkeypatch):
    def boom(data):
        raise RuntimeError("pdfminer choked")

    monkeypatch.setattr(documents, "PdfReader", _broken_reader)
    monkeypatch.setattr(documents, "_pdfminer_text", boom)
    with pytest.raises(DecodeError):
        decode_to_text(b"%PDF-", "application/pdf")


def test_blank_pdf_decodes_to_empty_text():
    from pypdf import PdfWriter

    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buf = io.BytesIO()
    writer.write(buf)
    assert decode_to_text(buf.getvalue(), "application/pdf") == ""
