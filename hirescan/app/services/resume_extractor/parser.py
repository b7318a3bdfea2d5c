"""
Heuristic resume field parsing - pattern matching over plain text, no NLP.
Every matcher is independent; a field that no pattern finds is left as None (lists stay empty).
"""
import re
from typing import List, Optional

from hirescan.app.schemas.resume import ResumeFields
from hirescan.app.utils.ordered_set import OrderedSet

from .patterns import (
    COMMON_POSITIONS,
    DEGREE_PATTERNS,
    EMAIL_PATTERN,
    NAME_PATTERN,
    PHONE_PATTERN,
    POSITION_LINE_PATTERN,
    SKILL_PATTERNS,
    SKILL_SEPARATORS,
    SKILL_TOKEN_MAX_EXCLUSIVE,
    SKILL_TOKEN_MIN_EXCLUSIVE,
    YEARS_PATTERN,
)


def find_section(text: str, keyword: str) -> Optional[str]:
    """
    Body of the section whose heading line starts with `keyword` (case-insensitive).

    The heading is followed by a colon or whitespace; the body runs until the next blank line,
    the next line starting with a capital letter, or the end of the text.
    """
    pattern = re.compile(
        r"^[ \t]*" + re.escape(keyword)
        + r"(?:\s*:\s*|\s+)(.*?)(?=\n[ \t]*\n|\n(?-i:[A-Z])|\Z)",
        re.IGNORECASE | re.MULTILINE | re.DOTALL,
    )
    match = pattern.search(text)
    if not match or not match.group(1).strip():
        return None
    return match.group(1)


def extract_name(text: str) -> Optional[str]:
    """First line starting with two or three capitalized words."""
    match = NAME_PATTERN.search(text)
    return match.group(0).strip() if match else None


def extract_email(text: str) -> Optional[str]:
    """Extract first email from text."""
    match = EMAIL_PATTERN.search(text)
    return match.group(0).strip() if match else None


def extract_phone(text: str) -> Optional[str]:
    """Extract first North-American style phone number from text."""
    match = PHONE_PATTERN.search(text)
    return match.group(0).strip() if match else None


def extract_qualifications(text: str) -> List[str]:
    """All degree mentions, table order then text order, duplicates dropped."""
    degrees: OrderedSet[str] = OrderedSet()
    for pattern in DEGREE_PATTERNS:
        for match in pattern.finditer(text):
            field = (match.groupdict().get("field") or "").strip()
            if field:
                degrees.add(f"{match.group('degree').strip()} in {field}")
            else:
                degrees.add(match.group(0).strip())
    return degrees.to_list()


def extract_section_skills(text: str) -> List[str]:
    """Tokens listed under a "Skills" heading that look like skill names by length."""
    section = find_section(text, "skills")
    if not section:
        return []
    tokens = (t.strip() for t in SKILL_SEPARATORS.split(section))
    return [t for t in tokens if SKILL_TOKEN_MIN_EXCLUSIVE < len(t) < SKILL_TOKEN_MAX_EXCLUSIVE]


def extract_skills(text: str) -> List[str]:
    """Known skills found anywhere in the text, then the Skills section entries; no duplicates."""
    skills: OrderedSet[str] = OrderedSet()
    for _category, pattern in SKILL_PATTERNS:
        skills.update(m.group(0).strip() for m in pattern.finditer(text))
    skills.update(extract_section_skills(text))
    return skills.to_list()


def extract_total_years(text: str) -> Optional[str]:
    """'5+ years of experience' -> '5 years'."""
    match = YEARS_PATTERN.search(text)
    return f"{match.group(1)} years" if match else None


def extract_last_position(text: str) -> Optional[str]:
    """
    Most recent position, read from the Experience section.

    A line starting with a title (optionally "at"/"@"/"|" company) is taken verbatim. Otherwise
    the first known title found in the section is used, with " at <Company>" when one follows it.
    Known titles are tried in COMMON_POSITIONS order, not in the order they appear in the text.
    """
    section = find_section(text, "experience")
    if not section:
        return None

    match = POSITION_LINE_PATTERN.search(section)
    if match and match.group(0).strip():
        return match.group(0).strip()

    for position in COMMON_POSITIONS:
        if position not in section:
            continue
        company_match = re.search(
            re.escape(position) + r"\s+(?i:at|@|\|)\s+([A-Z][\w \t&]*)",
            section,
        )
        if company_match and company_match.group(1).strip():
            return f"{position} at {company_match.group(1).strip()}"
        return position
    return None


def parse_resume_text(text: str) -> ResumeFields:
    """
    Parse resume text into structured fields.

    Pure and deterministic: the same text always yields the same fields, and no input raises.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return ResumeFields(
        name=extract_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        qualifications=extract_qualifications(text),
        skills=extract_skills(text),
        totalYears=extract_total_years(text),
        lastPosition=extract_last_position(text),
    )
