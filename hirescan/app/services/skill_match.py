"""Skill match score between a resume's skills and a job description."""
from typing import Optional, Sequence


def compute_match_score(skills: Sequence[str], description: Optional[str]) -> Optional[int]:
    """
    Percentage (0-100) of skills that appear inside some word of the description.
    Case-insensitive. None when there are no skills to compare.
    """
    skills = [s for s in skills if s and s.strip()]
    if not skills:
        return None
    words = (description or "").lower().split()
    matching = [s for s in skills if any(s.strip().lower() in w for w in words)]
    return round(len(matching) / len(skills) * 100)
