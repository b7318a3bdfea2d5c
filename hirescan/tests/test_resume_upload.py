"""Tests for POST /api/resume/upload"""
import uuid

import pytest
from pydantic import ValidationError

from hirescan.app.core.config import CONTENT_TYPE_DOCX, CONTENT_TYPE_PDF, settings
from hirescan.app.services.resume_extractor import process_resume


def test_upload_txt_returns_parsed_resume(client, sample_resume_text):
    """Returns 200 with file metadata, raw text and parsed fields."""
    r = client.post(
        "/api/resume/upload",
        files={"resume": ("resume.txt", sample_resume_text.encode("utf-8"), "text/plain")},
    )
    assert r.status_code == 200
    data = r.json()
    uuid.UUID(data["id"])
    assert data["filename"] == "resume.txt"
    assert data["contentType"] == "text/plain"
    assert data["rawText"] == sample_resume_text
    assert data["name"] == "Jane Doe"
    assert data["email"] == "jane.doe@example.com"
    assert data["totalYears"] == "5 years"
    assert data["lastPosition"] == "Software Engineer at Acme Corp"
    assert data["qualifications"] == ["B.S. in Computer Science"]
    assert "Excel" in data["skills"]


def test_upload_omits_absent_fields(client):
    """Fields with no match are left out; lists are present and empty."""
    r = client.post(
        "/api/resume/upload",
        files={"resume": ("notes.txt", b"nothing to see here", "text/plain")},
    )
    assert r.status_code == 200
    data = r.json()
    for key in ("name", "email", "phone", "totalYears", "lastPosition"):
        assert key not in data
    assert data["qualifications"] == []
    assert data["skills"] == []


def test_upload_ids_are_unique(client):
    files = {"resume": ("a.txt", b"Jane Doe", "text/plain")}
    first = client.post("/api/resume/upload", files=files).json()
    second = client.post("/api/resume/upload", files=files).json()
    assert first["id"] != second["id"]


def test_upload_docx(client, make_docx):
    data = make_docx(["John Smith", "john@example.org", "Skills: Figma, Sketch"])
    r = client.post("/api/resume/upload", files={"resume": ("cv.docx", data, CONTENT_TYPE_DOCX)})
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "John Smith"
    assert body["email"] == "john@example.org"
    assert "Figma" in body["skills"]


def test_upload_corrupted_pdf_still_succeeds(client):
    """Decode failures become an "Error:" raw text, not an HTTP error."""
    r = client.post("/api/resume/upload", files={"resume": ("cv.pdf", b"not really a pdf", CONTENT_TYPE_PDF)})
    assert r.status_code == 200
    assert r.json()["rawText"].startswith("Error:")


def test_upload_rejects_unsupported_type(client):
    r = client.post("/api/resume/upload", files={"resume": ("photo.png", b"\x89PNG", "image/png")})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid file type. Only PDF, DOCX, and TXT files are allowed."


def test_upload_requires_file(client):
    r = client.post("/api/resume/upload", files={"document": ("a.txt", b"Jane Doe", "text/plain")})
    assert r.status_code == 400
    assert r.json()["detail"] == "No file uploaded"


def test_upload_rejects_large_file(client, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_bytes", 16)
    r = client.post("/api/resume/upload", files={"resume": ("big.txt", b"x" * 17, "text/plain")})
    assert r.status_code == 400
    assert "too large" in r.json()["detail"]


def test_upload_accepts_file_at_size_limit(client, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_bytes", 16)
    r = client.post("/api/resume/upload", files={"resume": ("ok.txt", b"x" * 16, "text/plain")})
    assert r.status_code == 200


def test_process_resume_record_is_frozen(sample_resume_text):
    resume = process_resume(sample_resume_text.encode("utf-8"), "r.txt", "text/plain")
    assert resume.filename == "r.txt"
    assert resume.contentType == "text/plain"
    with pytest.raises(ValidationError):
        resume.id = "other"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy"}
