"""
Constant pattern tables for resume field parsing: degrees, skills by category, common job titles.
Tables are immutable tuples; order matters (it decides first-seen order and the title tie-break).
"""
import re

# "in <field>" or "- <field>" suffix after a degree, kept on the same line
_FIELD_SUFFIX = r"(?:[ \t]+in[ \t]+|[ \t]+-[ \t]+)(?P<field>[^,\n.]+)"


def _degree_pattern(names: str, with_field: bool = True) -> re.Pattern:
    pattern = r"(?<![\w.])(?P<degree>" + names + r")(?![A-Za-z])"
    if with_field:
        pattern += "(?:" + _FIELD_SUFFIX + ")?"
    return re.compile(pattern, re.IGNORECASE)


DEGREE_PATTERNS: tuple[re.Pattern, ...] = (
    _degree_pattern(r"B\.?S\.?|Bachelor of Science|Bachelor['’]?s Degree"),
    _degree_pattern(r"B\.?A\.?|Bachelor of Arts|Bachelor['’]?s Degree"),
    _degree_pattern(r"M\.?S\.?|Master of Science|Master['’]?s Degree"),
    _degree_pattern(r"M\.?B\.?A\.?|Master of Business Administration", with_field=False),
    _degree_pattern(r"Ph\.?D\.?|Doctor of Philosophy"),
    _degree_pattern(r"M\.?D\.?|Doctor of Medicine", with_field=False),
    _degree_pattern(r"J\.?D\.?|Juris Doctor", with_field=False),
)


def _skill_pattern(*names: str) -> re.Pattern:
    # Lookarounds instead of \b so "C++" and "C#" still end on a boundary
    return re.compile(r"(?<!\w)(?:" + "|".join(names) + r")(?!\w)", re.IGNORECASE)


# Words that are also plain English ("go", "express", "spring") only count in their proper case.
SKILL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("programming_languages", _skill_pattern(
        "JavaScript", "TypeScript", "Python", "Java", r"C\+\+", "C#", "Ruby", "PHP",
        "(?-i:Swift)", "Kotlin", "(?-i:Go)", "(?-i:Rust)", "SQL", "HTML", "CSS",
    )),
    ("frameworks", _skill_pattern(
        "React", "Angular", r"Vue\.?js", r"Node\.?js", "(?-i:Express)", "Django", "Flask",
        "(?-i:Spring)", "Laravel", "Ruby on Rails", "TensorFlow", "PyTorch", "Pandas", "NumPy",
    )),
    ("databases", _skill_pattern(
        "MongoDB", "MySQL", "PostgreSQL", "(?-i:Oracle)", "SQL Server", "Redis", "Cassandra",
        "DynamoDB",
    )),
    ("cloud_platforms", _skill_pattern(
        "AWS", "Amazon Web Services", "Azure", "Google Cloud", "GCP", "Heroku", "Firebase",
    )),
    ("devops_tools", _skill_pattern(
        "Docker", "Kubernetes", "Jenkins", "CI/CD", "Git", "GitHub", "GitLab", "Terraform",
    )),
    ("design_tools", _skill_pattern(
        "Photoshop", "Illustrator", "Figma", "(?-i:Sketch)", "UI/UX", "Adobe XD",
    )),
    ("soft_skills", _skill_pattern(
        "Leadership", "Communication", "Teamwork", r"Problem[\s-]Solving", "Critical Thinking",
        "Project Management", "Agile", "Scrum",
    )),
)

# Separators inside a "Skills" section body: commas, bullet glyphs, newlines
SKILL_SEPARATORS = re.compile(r"[,•·▪●◦\n]+")
SKILL_TOKEN_MIN_EXCLUSIVE = 2
SKILL_TOKEN_MAX_EXCLUSIVE = 30

# Fallback titles for the last-position heuristic; list order is the tie-break
COMMON_POSITIONS: tuple[str, ...] = (
    "Software Engineer",
    "Software Developer",
    "Front-end Developer",
    "Back-end Developer",
    "Full-stack Developer",
    "Data Scientist",
    "Data Engineer",
    "Machine Learning Engineer",
    "DevOps Engineer",
    "Product Manager",
    "Project Manager",
    "UX Designer",
    "UI Designer",
)

NAME_PATTERN = re.compile(r"^[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+){1,2}", re.MULTILINE)
EMAIL_PATTERN = re.compile(r"[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}")
PHONE_PATTERN = re.compile(r"(?:\+\d{1,2}[ \t]?)?(?:\(\d{3}\)|\d{3})[-. \t]?\d{3}[-. \t]?\d{4}")
YEARS_PATTERN = re.compile(r"(\d+)\+?\s+years?(?:\s+of)?\s+experience", re.IGNORECASE)

# "Title", "Title at Company", "Title @ Company", "Title | Company" at the start of a line.
# "at" is a plain word, so the leading run already covers it.
POSITION_LINE_PATTERN = re.compile(
    r"^[ \t]*\w[\w \t]*(?:[@|][ \t]*\w[\w \t&]*)?",
    re.MULTILINE,
)
