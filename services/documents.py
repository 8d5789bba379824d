"""
Uploaded bytes ➜ plain text, the decoding step in front of the extractor.

Supports PDF (pypdf, with pdfminer as the richer fallback), DOCX and TXT.
A corrupt file raises DecodeError; a file that decodes to nothing returns "".
"""
import io
import logging
from pathlib import PurePath
from typing import Callable, Dict, Optional

import docx
from pdfminer.high_level import extract_text as pdfminer_extract_text
from pypdf import PdfReader

import config
from parsing.cv_parser import ExtractionResult, extract_fields
from parsing.skills import SkillVocabulary

logger = logging.getLogger(__name__)
logging.getLogger("pdfminer").setLevel(logging.ERROR)

MIME_FORMATS = {
    "application/pdf": "pdf",
    "application/x-pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "text/plain": "txt",
}
EXTENSION_FORMATS = {".pdf": "pdf", ".docx": "docx", ".txt": "txt"}


class DocumentError(Exception):
    """Base class for upload decoding failures."""


class UnsupportedFormatError(DocumentError):
    pass


class DocumentTooLargeError(DocumentError):
    pass


class DecodeError(DocumentError):
    """The file claims a supported format but could not be read."""


def resolve_format(mime_type: Optional[str], filename: Optional[str] = None) -> str:
    mime = (mime_type or "").split(";")[0].strip().lower()
    if mime in MIME_FORMATS:
        return MIME_FORMATS[mime]
    suffix = PurePath(filename).suffix.lower() if filename else ""
    if suffix in EXTENSION_FORMATS:
        return EXTENSION_FORMATS[suffix]
    raise UnsupportedFormatError(f"Unsupported document type: {mime_type or filename or 'unknown'}")


def _pdfminer_text(data: bytes) -> str:
    return pdfminer_extract_text(io.BytesIO(data)) or ""


def _read_pdf(data: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(data))
        text = "\n".join(p.extract_text() or "" for p in reader.pages)
    except Exception as exc:
        logger.info("pypdf failed (%s), switching to pdfminer", exc)
        try:
            return _pdfminer_text(data)
        except Exception as exc2:
            raise DecodeError(f"PDF parsing failed: {exc2}") from exc2

    if len(text.strip()) < config.PDF_MIN_TEXT_CHARS:
        try:
            alt = _pdfminer_text(data)
        except Exception as exc:
            logger.warning("pdfminer retry failed: %s", exc)
        else:
            if len(alt.strip()) > len(text.strip()):
                logger.info("Used pdfminer for richer text")
                text = alt
    return text


def _read_docx(data: bytes) -> str:
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as exc:
        raise DecodeError(f"DOCX parsing failed: {exc}") from exc
    lines = [para.text for para in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return "\n".join(lines)


def _read_txt(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1", errors="ignore")


READERS: Dict[str, Callable[[bytes], str]] = {
    "pdf": _read_pdf,
    "docx": _read_docx,
    "txt": _read_txt,
}


def decode_to_text(data: bytes, mime_type: Optional[str], filename: Optional[str] = None) -> str:
    fmt = resolve_format(mime_type, filename)
    if len(data) > config.MAX_UPLOAD_BYTES:
        raise DocumentTooLargeError(
            f"Upload is {len(data)} bytes; the limit is {config.MAX_UPLOAD_BYTES}"
        )
    text = READERS[fmt](data)
    logger.debug("Decoded %s upload into %d characters", fmt, len(text))
    return text


def parse_document(
    data: bytes,
    mime_type: Optional[str],
    filename: Optional[str] = None,
    vocabulary: Optional[SkillVocabulary] = None,
) -> ExtractionResult:
    """Decode an upload and extract its fields in one call."""
    return extract_fields(decode_to_text(data, mime_type, filename), vocabulary)
