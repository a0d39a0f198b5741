import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Remote text-extraction / analysis services
    api_url: str = "http://localhost:3001/api"
    analysis_api_key: str = ""
    request_timeout_seconds: float = 30.0

    # Which collaborator turns resume text into structured attributes
    analysis_backend: str = "gemini"  # "gemini" | "remote"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    max_upload_size_mb: int = 5
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
