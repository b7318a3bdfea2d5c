"""
Job search via SerpAPI Google Jobs.

Requests go through httpx with a timeout and bounded retries (exponential backoff, capped).
Results are mapped to Job, post-filtered by location, paginated, and cached for job-details lookups.
"""
from __future__ import annotations

import base64
import binascii
import time
import uuid
from typing import Any, Callable, Optional
from urllib.parse import quote

import httpx

from hirescan.app.core.config import (
    DEFAULT_JOB_POSTED,
    DEFAULT_JOB_SOURCE,
    DEFAULT_JOB_TYPE,
    GOOGLE_JOBS_ENGINE,
    settings,
)
from hirescan.app.core.logging_config import get_logger
from hirescan.app.schemas.job import Job, JobSearchResult
from hirescan.app.services import job_cache

logger = get_logger("services.job_search")


class JobSearchError(RuntimeError):
    """Job provider request failed or returned an error."""


class JobSearchConfigError(JobSearchError):
    """Job provider is not configured (missing API key)."""


def google_jobs_search_url(title: str, company: str) -> str:
    return f"https://www.google.com/search?q={quote(f'{title} {company}')}&ibp=htl;jobs"


def map_provider_job(raw: dict[str, Any]) -> Job:
    """Map one SerpAPI jobs_results entry to Job."""
    title = raw.get("title") or ""
    company = raw.get("company_name") or ""
    extensions = raw.get("detected_extensions") or {}

    via = (raw.get("via") or "").strip()
    source = via[4:].strip() if via.lower().startswith("via ") else via
    source = source or DEFAULT_JOB_SOURCE

    apply_options = raw.get("apply_options") or []
    related_links = raw.get("related_links") or []
    if apply_options and apply_options[0].get("link"):
        url = apply_options[0]["link"]
    elif related_links and related_links[0].get("link"):
        url = related_links[0]["link"]
    else:
        url = google_jobs_search_url(title, company)

    return Job(
        id=raw.get("job_id") or str(uuid.uuid4()),
        title=title,
        company=company,
        location=raw.get("location") or "",
        description=raw.get("description"),
        type=extensions.get("schedule_type") or DEFAULT_JOB_TYPE,
        posted=extensions.get("posted_at") or DEFAULT_JOB_POSTED,
        url=url,
        source=source,
        isRemote=bool(extensions.get("work_from_home", False)),
    )


def filter_by_location(jobs: list[Job], location: str) -> list[Job]:
    """
    Keep jobs whose location contains the requested one (case-insensitive).
    A request mentioning "remote" also keeps listings flagged remote.
    """
    requested = location.lower().strip()
    wants_remote = "remote" in requested
    return [
        job for job in jobs
        if requested in job.location.lower() or (wants_remote and job.isRemote is True)
    ]


def paginate(jobs: list[Job], page: int, limit: int) -> list[Job]:
    start = (page - 1) * limit
    return jobs[start:start + limit]


def _placeholder_job(job_id: str, decoded_id: Optional[str]) -> Job:
    if decoded_id is not None:
        return Job(
            id=job_id,
            title="Job Title",
            company="Company Name",
            location="Location",
            description=(
                "This is a placeholder job description. Details for this listing are not stored; "
                "open the listing on Google Jobs for the full posting."
            ),
            url=f"https://www.google.com/search?q=job&ibp=htl;jobs&fpstate=tldetail&htidocid={quote(decoded_id)}",
            source=DEFAULT_JOB_SOURCE,
            isRemote=False,
        )
    return Job(
        id=job_id,
        title="Job Details",
        company="Company",
        location="Location",
        description="Job details are not available. Please go back to the search results and try again.",
        url="",
        source="Unknown",
        isRemote=False,
    )


def decode_provider_job_id(job_id: str) -> Optional[str]:
    """Decoded SerpAPI job id, or None when the id is not base64 text from the provider."""
    try:
        decoded = base64.b64decode(job_id + "=" * (-len(job_id) % 4)).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None
    if "serpapi" in decoded or GOOGLE_JOBS_ENGINE in decoded:
        return decoded
    return None


class JobSearchService:
    """SerpAPI Google Jobs client with retry/backoff."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.api_key = settings.serpapi_api_key if api_key is None else api_key
        self.base_url = base_url or settings.serpapi_url
        self.timeout = timeout if timeout is not None else settings.http_request_timeout
        self.max_retries = max(1, max_retries if max_retries is not None else settings.job_search_max_retries)
        self._client = client
        self._sleep = sleep

    def _backoff_delay(self, attempt: int) -> float:
        return min(settings.job_search_backoff_base * (2 ** attempt), settings.job_search_backoff_max)

    def _get(self, client: httpx.Client, params: dict[str, Any]) -> httpx.Response:
        last_error: JobSearchError | None = None
        for attempt in range(self.max_retries):
            logger.debug("SerpAPI request attempt %d of %d", attempt + 1, self.max_retries)
            try:
                response = client.get(self.base_url, params=params)
                if response.is_success:
                    return response
                last_error = JobSearchError(
                    f"SerpAPI request failed with status: {response.status_code}. {response.text}"
                )
                logger.warning("SerpAPI attempt %d failed status=%s", attempt + 1, response.status_code)
                if response.status_code == 429:
                    self._sleep(settings.job_search_rate_limit_wait * (attempt + 1))
            except httpx.HTTPError as e:
                last_error = JobSearchError(f"SerpAPI network error: {e}")
                logger.warning("SerpAPI attempt %d network error: %s", attempt + 1, e)

            if attempt < self.max_retries - 1:
                delay = self._backoff_delay(attempt)
                logger.info("Retrying SerpAPI request in %.1fs", delay)
                self._sleep(delay)

        raise last_error

    def _fetch(self, params: dict[str, Any]) -> dict[str, Any]:
        if self._client is not None:
            response = self._get(self._client, params)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                response = self._get(client, params)
        try:
            return response.json()
        except ValueError as e:
            raise JobSearchError(f"SerpAPI returned invalid JSON: {e}") from e

    def search_jobs(self, query: str, location: str, page: int = 1, limit: int | None = None) -> JobSearchResult:
        """
        Search jobs by title and location.

        Raises:
            JobSearchConfigError: SERPAPI_API_KEY is not set.
            JobSearchError: provider failed after retries or reported an error.
        """
        if not self.api_key:
            raise JobSearchConfigError("SERPAPI_API_KEY is not set. Please set it in your environment variables.")
        limit = limit or settings.job_search_default_limit

        logger.info("Starting job search query=%r location=%r page=%d limit=%d", query, location, page, limit)
        data = self._fetch({
            "engine": GOOGLE_JOBS_ENGINE,
            "q": query,
            "location": location,
            "api_key": self.api_key,
        })

        if data.get("error"):
            logger.error("SerpAPI error: %s", data["error"])
            raise JobSearchError(f"SerpAPI error: {data['error']}")

        results = data.get("jobs_results")
        if not isinstance(results, list) or not results:
            logger.info("No job results in SerpAPI response query=%r", query)
            return JobSearchResult(jobs=[], totalResults=0)

        jobs = [map_provider_job(raw) for raw in results if isinstance(raw, dict)]
        job_cache.set_many(jobs)

        filtered = filter_by_location(jobs, location)
        logger.info("Filtered %d jobs down to %d matching %r", len(jobs), len(filtered), location)

        return JobSearchResult(jobs=paginate(filtered, page, limit), totalResults=len(filtered))

    def get_job_details(self, job_id: str) -> Job:
        """Best-effort job details: cached listing, else a placeholder."""
        cached = job_cache.get(job_id)
        if cached is not None:
            return cached
        decoded = decode_provider_job_id(job_id)
        logger.info("Job %s not cached; returning placeholder decoded=%s", job_id, decoded is not None)
        return _placeholder_job(job_id, decoded)
