"""
Simple configuration management.

The ``Settings`` dataclass is a typed view of the environment variables
the service understands.  ``get_settings`` reads the current
environment and builds an instance; a module level ``settings`` object
is created once at import time so other modules can import it without
repeatedly reading environment variables.  Tests build their own
``Settings`` and pass it to ``create_app`` instead.
"""

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_PORT = 4000


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Users API"
    api_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # DELETE answers 204 with a JSON content type and no body.  With
    # DELETE_RESPONSE_BODY the 204 also carries
    # ``{"message": "User deleted successfully"}``; HTTP/1.1 servers that
    # enforce 204 framing (uvicorn on h11) refuse to send it.
    delete_response_body: bool = False


def _int(value: Optional[str], default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        project_name=os.getenv("PROJECT_NAME", "Users API"),
        api_version=os.getenv("API_VERSION", "1.0.0"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), DEFAULT_PORT),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or None,
        delete_response_body=_bool(os.getenv("DELETE_RESPONSE_BODY"), False),
    )


settings = get_settings()
