"""
Resume upload endpoint - extracts text (PDF/DOCX/TXT), parses fields, returns the resume record
"""
from fastapi import APIRouter, File, HTTPException, UploadFile

from hirescan.app.core.config import ALLOWED_CONTENT_TYPES, settings
from hirescan.app.core.logging_config import get_logger
from hirescan.app.services.resume_extractor import UnsupportedFormatError, process_resume

logger = get_logger("api.resume")
router = APIRouter()


@router.post("/upload")
async def upload_resume(file: UploadFile | None = File(None, alias="resume")):
    """
    Upload a resume file (PDF, DOCX, TXT) in the multipart field `resume`.

    Returns the parsed resume: id, filename, contentType, rawText and any of
    name, email, phone, qualifications, skills, totalYears, lastPosition that were found.
    A rawText starting with "Error:" means the file could not be decoded.
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    content_type = file.content_type or ""
    if content_type not in ALLOWED_CONTENT_TYPES:
        logger.info("Rejected upload filename=%s content_type=%s", file.filename, content_type)
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Only PDF, DOCX, and TXT files are allowed.",
        )

    contents = await file.read(settings.max_upload_bytes + 1)
    if len(contents) > settings.max_upload_bytes:
        max_mb = settings.max_upload_bytes // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File too large. Maximum size is {max_mb} MB.")

    logger.info("File received filename=%s size=%d content_type=%s", file.filename, len(contents), content_type)

    try:
        resume = process_resume(contents, file.filename or "", content_type)
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as exc:
        logger.exception("Error processing resume filename=%s", file.filename)
        raise HTTPException(status_code=500, detail="Failed to process resume") from exc

    return resume.to_response()
