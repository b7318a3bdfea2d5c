"""
Text extraction for uploaded resumes - PDF (pdfplumber), DOCX (python-docx), plain text.
Decode failures come back as an "Error: ..." sentinel string so the upload still completes.
"""
from io import BytesIO

import pdfplumber
from docx import Document

from hirescan.app.core.config import CONTENT_TYPE_DOCX, CONTENT_TYPE_PDF, CONTENT_TYPE_TXT
from hirescan.app.core.logging_config import get_logger

logger = get_logger("services.text_extract")

EXTRACTION_ERROR_PREFIX = "Error:"

PDF_ERROR_TEXT = (
    "Error: Could not extract text from this PDF. The file may be corrupted, "
    "password-protected, or in an unsupported format."
)
DOCX_ERROR_TEXT = (
    "Error: Could not extract text from this DOCX file. The file may be corrupted "
    "or in an unsupported format."
)
TXT_ERROR_TEXT = (
    "Error: Could not extract text from this TXT file. The file may be corrupted "
    "or in an unsupported format."
)


class UnsupportedFormatError(ValueError):
    """Raised for a content type the extractor has no decoder for."""

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(f"Unsupported file type: {content_type}")


def extract_text_from_pdf(data: bytes) -> str:
    """Extract raw text from PDF bytes using pdfplumber."""
    try:
        text_parts = []
        with pdfplumber.open(BytesIO(data)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
        return "\n".join(text_parts)
    except Exception:
        logger.warning("PDF text extraction failed size_bytes=%d", len(data), exc_info=True)
        return PDF_ERROR_TEXT


def extract_text_from_docx(data: bytes) -> str:
    """Extract paragraph text from DOCX bytes using python-docx."""
    try:
        document = Document(BytesIO(data))
        return "\n".join(p.text for p in document.paragraphs)
    except Exception:
        logger.warning("DOCX text extraction failed size_bytes=%d", len(data), exc_info=True)
        return DOCX_ERROR_TEXT


def extract_text_from_txt(data: bytes) -> str:
    """Decode plain text as UTF-8."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("TXT decode failed size_bytes=%d", len(data), exc_info=True)
        return TXT_ERROR_TEXT


_EXTRACTORS = {
    CONTENT_TYPE_PDF: extract_text_from_pdf,
    CONTENT_TYPE_DOCX: extract_text_from_docx,
    CONTENT_TYPE_TXT: extract_text_from_txt,
}


def extract_text(data: bytes, content_type: str) -> str:
    """
    Extract plain text from file bytes based on the declared content type.

    Raises:
        UnsupportedFormatError: content type is not PDF, DOCX or plain text.
    """
    extractor = _EXTRACTORS.get(content_type)
    if extractor is None:
        raise UnsupportedFormatError(content_type)
    return extractor(data)


def is_extraction_error(text: str) -> bool:
    """
    True when text starts with the extraction failure prefix.
    A TXT upload whose own content begins with "Error:" is indistinguishable from a failed extraction.
    """
    return text.startswith(EXTRACTION_ERROR_PREFIX)
