"""
Resume extraction module - text extraction (pdfplumber / python-docx) + heuristic field parsing.
"""
from .extractor import process_resume
from .parser import find_section, parse_resume_text
from .text_extract import UnsupportedFormatError, extract_text, is_extraction_error

__all__ = [
    "UnsupportedFormatError",
    "extract_text",
    "find_section",
    "is_extraction_error",
    "parse_resume_text",
    "process_resume",
]
