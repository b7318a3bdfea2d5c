"""
Cache of job listings seen in search results, keyed by job id.
In-memory LRU + TTL. Lets the job-details endpoint return the real listing
for ids handed out by a recent search.
"""
from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import Iterable, Optional

from hirescan.app.core.config import settings
from hirescan.app.core.logging_config import get_logger
from hirescan.app.schemas.job import Job

logger = get_logger("services.job_cache")

# Job id -> (job, expiry_timestamp) - OrderedDict maintains LRU order
_cache: OrderedDict[str, tuple[Job, float]] = OrderedDict()
_lock = threading.Lock()


def get(job_id: str) -> Optional[Job]:
    """Get cached job. Returns None on miss or expiry."""
    with _lock:
        if job_id not in _cache:
            return None
        job, expiry = _cache[job_id]
        if time.monotonic() > expiry:
            del _cache[job_id]
            return None
        _cache.move_to_end(job_id)
        return job


def set_many(jobs: Iterable[Job]) -> None:
    """Cache jobs with TTL. Evicts LRU entries when at capacity."""
    if settings.job_cache_max_entries <= 0:
        return
    with _lock:
        for job in jobs:
            _cache.pop(job.id, None)
            while len(_cache) >= settings.job_cache_max_entries and _cache:
                _cache.popitem(last=False)
            _cache[job.id] = (job, time.monotonic() + settings.job_cache_ttl)
        size = len(_cache)
    logger.debug("Jobs cached entries=%d", size)


def clear() -> None:
    """Clear all entries (for tests)."""
    with _lock:
        _cache.clear()
