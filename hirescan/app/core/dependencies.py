"""
Dependency injection utilities
"""
from hirescan.app.services.job_search import JobSearchService


def get_job_search_service() -> JobSearchService:
    """Job search client configured from settings"""
    return JobSearchService()
