"""
Job search endpoints - SerpAPI Google Jobs search with location post-filter, best-effort job details
"""
import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from hirescan.app.core.config import settings
from hirescan.app.core.dependencies import get_job_search_service
from hirescan.app.core.logging_config import get_logger
from hirescan.app.schemas.job import Job, JobSearchQuery, JobSearchResult
from hirescan.app.services.job_search import JobSearchConfigError, JobSearchError, JobSearchService
from hirescan.app.services.skill_match import compute_match_score

logger = get_logger("api.jobs")
router = APIRouter()


async def _read_params(request: Request) -> dict[str, Any]:
    """Search params from the query string, falling back to a JSON body for POST."""
    params: dict[str, Any] = dict(request.query_params)
    if request.method == "POST":
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = None
        if isinstance(body, dict):
            for key, value in body.items():
                params.setdefault(key, value)
    return params


def _param_or_default(value: Any, default: int) -> Any:
    return default if value is None or value == "" else value


def _split_skills(raw: Any) -> list[str]:
    if isinstance(raw, list):
        return [str(s).strip() for s in raw if str(s).strip()]
    if isinstance(raw, str):
        return [s.strip() for s in raw.split(",") if s.strip()]
    return []


@router.api_route("/search", methods=["GET", "POST"], response_model=JobSearchResult, response_model_exclude_none=True)
async def search_jobs(
    request: Request,
    service: JobSearchService = Depends(get_job_search_service),
):
    """
    Search jobs by title and location (both required).

    Parameters come from the query string or a JSON body: jobTitle, location, page (default 1),
    limit (default 10), optional skills (comma-separated) to fill matchScore.
    Only the first of several comma-separated titles is searched.
    """
    params = await _read_params(request)
    job_title = str(params.get("jobTitle") or "").strip()
    location = str(params.get("location") or "").strip()
    if not job_title or not location:
        raise HTTPException(status_code=400, detail="Job title and location are required")

    try:
        query = JobSearchQuery(
            jobTitle=job_title,
            location=location,
            page=_param_or_default(params.get("page"), 1),
            limit=_param_or_default(params.get("limit"), settings.job_search_default_limit),
            skills=_split_skills(params.get("skills")),
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid search parameters: {e.errors()[0].get('msg')}")

    titles = query.job_titles
    if not titles:
        raise HTTPException(status_code=400, detail="Job title and location are required")
    if len(titles) > 1:
        logger.info("Multiple job titles %s; searching with first: %s", titles, titles[0])

    try:
        result = await run_in_threadpool(
            service.search_jobs, titles[0], query.location, query.page, query.limit
        )
    except JobSearchConfigError as e:
        logger.error("Job search not configured: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    except JobSearchError as e:
        logger.error("Job search failed title=%r location=%r: %s", titles[0], query.location, e)
        raise HTTPException(status_code=502, detail=str(e))

    if query.skills:
        result = JobSearchResult(
            jobs=[
                job.model_copy(update={"matchScore": compute_match_score(query.skills, job.description)})
                for job in result.jobs
            ],
            totalResults=result.totalResults,
        )

    logger.info("Job search completed title=%r location=%r total=%d", titles[0], query.location, result.totalResults)
    return result


@router.get("/{job_id}", response_model=Job, response_model_exclude_none=True)
def get_job(
    job_id: str,
    service: JobSearchService = Depends(get_job_search_service),
):
    """Job details: the listing from a recent search, else placeholder data."""
    if not job_id.strip():
        raise HTTPException(status_code=400, detail="Job ID is required")
    return service.get_job_details(job_id)
