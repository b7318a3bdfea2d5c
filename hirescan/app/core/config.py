"""
HireScan settings and constants.
hirescan/.env is loaded into the environment first (it wins over exported shell values for local dev),
then pydantic-settings reads the environment. In deployment the .env file is optional.

Env-driven values live on Settings; fixed business constants (content types, provider defaults) follow it.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: hirescan/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. override=True so a stale
# SERPAPI_API_KEY exported in the shell does not win over the project file.
# When .env doesn't exist (prod), this is a no-op; platform env vars are used.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "HireScan"
    app_version: str = "1.0.0"
    port: int = 8001
    cors_origins: str = "*"

    # Upload
    max_upload_bytes: int = 10 * 1024 * 1024

    # Job search provider (SerpAPI Google Jobs)
    serpapi_api_key: str = ""
    serpapi_url: str = "https://serpapi.com/search"

    # HTTP / network
    http_request_timeout: int = 30
    job_search_max_retries: int = 3
    job_search_backoff_base: float = 1.0
    job_search_backoff_max: float = 5.0
    job_search_rate_limit_wait: float = 2.0
    job_search_default_limit: int = 10

    # Job cache (seconds / entries)
    job_cache_ttl: int = 3600
    job_cache_max_entries: int = 500

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

CONTENT_TYPE_PDF: str = "application/pdf"
CONTENT_TYPE_DOCX: str = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
CONTENT_TYPE_TXT: str = "text/plain"

# Upload allow-list, in the order shown to clients
ALLOWED_CONTENT_TYPES: tuple[str, ...] = (
    CONTENT_TYPE_PDF,
    CONTENT_TYPE_DOCX,
    CONTENT_TYPE_TXT,
)

# Job search
GOOGLE_JOBS_ENGINE: str = "google_jobs"
DEFAULT_JOB_SOURCE: str = "Google Jobs"
DEFAULT_JOB_TYPE: str = "Full-time"
DEFAULT_JOB_POSTED: str = "Recently"
