"""
Pytest fixtures for HireScan API tests.
Job search provider is replaced by an in-process fake; no network calls.
"""
import io
import os

import pytest
from docx import Document
from fastapi.testclient import TestClient

# Must override any .env value before settings load
os.environ["SERPAPI_API_KEY"] = ""

from hirescan.app.core.dependencies import get_job_search_service
from hirescan.app.schemas.job import Job, JobSearchResult
from hirescan.app.services import job_cache
from hirescan.app.services.job_search import JobSearchService
from hirescan.main import app


class FakeJobSearchService(JobSearchService):
    """Records search calls and returns a canned result (or raises `error`)."""

    def __init__(self):
        super().__init__(api_key="test-key")
        self.calls = []
        self.error = None
        self.result = JobSearchResult(
            jobs=[
                Job(
                    id="job-1",
                    title="Python Developer",
                    company="Acme Corp",
                    location="Austin, TX",
                    description="We need Python and SQL experts",
                    type="Full-time",
                    posted="2 days ago",
                    url="https://example.com/apply/1",
                    source="LinkedIn",
                    isRemote=False,
                ),
            ],
            totalResults=1,
        )

    def search_jobs(self, query, location, page=1, limit=None):
        self.calls.append((query, location, page, limit))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def clear_job_cache():
    job_cache.clear()
    yield
    job_cache.clear()


@pytest.fixture
def fake_job_search():
    return FakeJobSearchService()


@pytest.fixture
def client(fake_job_search):
    """TestClient with the job search provider replaced by the fake."""
    app.dependency_overrides[get_job_search_service] = lambda: fake_job_search
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_job_search_service, None)


@pytest.fixture
def sample_resume_text():
    return (
        "Jane Doe\n"
        "jane.doe@example.com | (555) 123-4567\n"
        "Senior engineer with 5+ years of experience building web platforms.\n"
        "\n"
        "Skills:\n"
        "Python, Excel, SQL, Docker\n"
        "\n"
        "Experience\n"
        "Software Engineer at Acme Corp\n"
        "- built data pipelines with Python and PostgreSQL\n"
        "\n"
        "Education\n"
        "B.S. in Computer Science, State University\n"
    )


def build_docx(paragraphs: list[str]) -> bytes:
    document = Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_pdf(lines: list[str]) -> bytes:
    """Single-page PDF with one Helvetica text line per entry (ASCII only)."""
    ops = " ".join(f"({line}) Tj 0 -16 Td" for line in lines)
    content = f"BT /F1 12 Tf 72 720 Td {ops} ET"
    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        "<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        "/Resources << /Font << /F1 5 0 R >> >> >>",
        f"<< /Length {len(content)} >>\nstream\n{content}\nendstream",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n{body}\nendobj\n".encode("latin-1")
    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode("latin-1")
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode("latin-1")
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode("latin-1")
    return out


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def make_pdf():
    return build_pdf
