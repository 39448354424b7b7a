"""Server configuration.

Defaults can be overridden with environment variables:

- GCD_SERVER_HOST: address to bind (default: 127.0.0.1)
- GCD_SERVER_PORT: port to listen on (default: 3000)
- GCD_SERVER_LOG_LEVEL: logging level name (default: INFO)
"""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field, field_validator


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_PREFIX = "GCD_SERVER_"


class ServerConfig(BaseModel):
    """Bind address and logging settings for the HTTP server."""

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def url(self) -> str:
        """Base URL the server is reachable at."""
        return f"http://{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Build a config from GCD_SERVER_* environment variables."""
        environ = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field in ("host", "port", "log_level"):
            key = ENV_PREFIX + field.upper()
            if environ.get(key):
                values[field] = environ[key]
        return cls.model_validate(values)
