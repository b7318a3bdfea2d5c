"""
Resume processing: extract text from the uploaded file, parse fields, attach file metadata.
"""
import uuid

from hirescan.app.core.logging_config import get_logger
from hirescan.app.schemas.resume import Resume

from .parser import parse_resume_text
from .text_extract import extract_text, is_extraction_error

logger = get_logger("services.resume_extractor")


def process_resume(data: bytes, filename: str, content_type: str) -> Resume:
    """
    Build the resume record for one upload.

    Raises:
        UnsupportedFormatError: content type has no text extractor.
    """
    text = extract_text(data, content_type)
    fields = parse_resume_text(text)

    resume = Resume(
        id=str(uuid.uuid4()),
        filename=filename,
        contentType=content_type,
        rawText=text,
        **fields.model_dump(),
    )

    if is_extraction_error(text):
        logger.warning("Resume text extraction degraded filename=%s content_type=%s", filename, content_type)
    logger.info(
        "Processed resume id=%s filename=%s content_type=%s text_len=%d skills=%d qualifications=%d",
        resume.id,
        filename,
        content_type,
        len(text),
        len(resume.skills),
        len(resume.qualifications),
    )
    return resume
