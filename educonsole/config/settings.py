"""Pydantic Settings for the console API client.

All environment variables use the EDUCONSOLE_ prefix.
Example: EDUCONSOLE_API_BASE_URL=https://api.example.edu, EDUCONSOLE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ConsoleSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Remote API (service paths already carry the /api/v1 prefix)
    api_base_url: str = "http://localhost:4000"
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    default_headers: dict[str, str] = {}

    # Session
    token_file: str | None = None  # None keeps the token in memory only

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "EDUCONSOLE_"}
