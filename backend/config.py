import os
from pydantic import field_validator
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
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # slowapi limit string applied to the scoring and keyword routes
    rate_limit: str = "60/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
