"""
Resume Pydantic schemas - matches the upload response payload (camelCase keys)
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResumeFields(BaseModel):
    """Fields recovered from resume text. Optional scalars stay None when no pattern matched."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    qualifications: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    totalYears: Optional[str] = None
    lastPosition: Optional[str] = None


class Resume(ResumeFields):
    """Resume record returned by the upload endpoint. Created once per upload, never mutated."""
    id: str
    filename: str
    contentType: str
    rawText: str

    def to_response(self) -> dict:
        """JSON body for clients: absent optional fields are omitted."""
        return self.model_dump(exclude_none=True)
