"""Document-to-text conversion for uploaded CVs.

Each supported format has one ``TextExtractor`` registered in ``_EXTRACTORS``;
adding a format means adding a subclass and a registry entry.
"""

import io
import logging
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import PurePath

import pdfplumber
from docx import Document
from docx.table import Table

from services.errors import FormatDecodeError, UnsupportedFormat

logger = logging.getLogger(__name__)


class DocumentFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"


CONTENT_TYPES: dict[str, DocumentFormat] = {
    "application/pdf": DocumentFormat.PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DocumentFormat.DOCX,
    "text/plain": DocumentFormat.TXT,
}

EXTENSIONS: dict[str, DocumentFormat] = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.DOCX,
    ".txt": DocumentFormat.TXT,
}


class TextExtractor(ABC):
    """Converts a payload of one document format into plain text."""

    format: DocumentFormat

    @abstractmethod
    def decode(self, payload: bytes) -> str:
        """Decode the payload. May raise anything; ``extract`` wraps it."""

    def extract(self, payload: bytes | str) -> str:
        try:
            return self.decode(payload)
        except Exception as exc:
            logger.warning("Failed to decode %s document: %s", self.format.value, exc)
            raise FormatDecodeError(self.format.value, exc) from exc


class PdfTextExtractor(TextExtractor):
    """Paginated documents: page texts joined in page order."""

    format = DocumentFormat.PDF

    def decode(self, payload: bytes) -> str:
        with pdfplumber.open(io.BytesIO(payload)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
        return "\n".join(pages)


class DocxTextExtractor(TextExtractor):
    """Flow documents: paragraphs and table rows in body order."""

    format = DocumentFormat.DOCX

    def decode(self, payload: bytes) -> str:
        doc = Document(io.BytesIO(payload))
        lines: list[str] = []
        for block in doc.iter_inner_content():
            if isinstance(block, Table):
                lines.extend(_table_rows(block))
            else:
                lines.append(block.text)
        return "\n".join(lines)


def _table_rows(table: Table) -> list[str]:
    """One tab-separated line per row; merged cells appear once."""
    rows = []
    for row in table.rows:
        cells: list[str] = []
        for cell in row.cells:
            text = cell.text.strip()
            if text and (not cells or cells[-1] != text):
                cells.append(text)
        rows.append("\t".join(cells))
    return rows


class PlainTextExtractor(TextExtractor):
    format = DocumentFormat.TXT

    def decode(self, payload: bytes | str) -> str:
        if isinstance(payload, str):
            return payload
        return payload.decode("utf-8")


_EXTRACTORS: dict[DocumentFormat, TextExtractor] = {
    extractor.format: extractor
    for extractor in (PdfTextExtractor(), DocxTextExtractor(), PlainTextExtractor())
}


def get_extractor(fmt: DocumentFormat | str) -> TextExtractor:
    """Look up the extractor for a format tag, raising UnsupportedFormat if unknown."""
    try:
        return _EXTRACTORS[DocumentFormat(fmt)]
    except (ValueError, KeyError):
        raise UnsupportedFormat(fmt) from None


def extract_text(payload: bytes | str, fmt: DocumentFormat | str) -> str:
    """Extract all text from a document payload of the given format."""
    extractor = get_extractor(fmt)
    text = extractor.extract(payload)
    logger.info("Extracted %d characters from %s document", len(text), extractor.format.value)
    return text


def detect_format(filename: str | None, content_type: str | None = None) -> DocumentFormat:
    """Resolve the document format of an upload.

    The declared MIME type wins; the file extension is the fallback.
    """
    if content_type:
        mime = content_type.split(";")[0].strip().lower()
        if mime in CONTENT_TYPES:
            return CONTENT_TYPES[mime]

    if filename:
        suffix = PurePath(filename).suffix.lower()
        if suffix in EXTENSIONS:
            return EXTENSIONS[suffix]

    raise UnsupportedFormat(content_type or filename)
