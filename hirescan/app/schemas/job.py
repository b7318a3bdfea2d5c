"""
Job search Pydantic schemas
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class Job(BaseModel):
    id: str
    title: str
    company: str
    location: str
    description: Optional[str] = None
    type: Optional[str] = None
    posted: Optional[str] = None
    url: Optional[str] = None
    source: Optional[str] = None
    isRemote: Optional[bool] = None
    matchScore: Optional[int] = None


class JobSearchQuery(BaseModel):
    """Validated search parameters (query string or JSON body)."""
    jobTitle: str = Field(min_length=1)
    location: str = Field(min_length=1)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    skills: List[str] = Field(default_factory=list)

    @property
    def job_titles(self) -> List[str]:
        """Comma-separated titles, trimmed, blanks dropped."""
        return [t.strip() for t in self.jobTitle.split(",") if t.strip()]


class JobSearchResult(BaseModel):
    jobs: List[Job] = Field(default_factory=list)
    totalResults: int = 0
