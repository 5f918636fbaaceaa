"""Server configuration and startup environment loading."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from api_keys_server import __version__

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path(".env")

# Environment variables read by ServerSettings.from_env()
ENV_ENV_FILE = "API_KEYS_SERVER_ENV_FILE"
ENV_REGISTRY = "API_KEYS_SERVER_REGISTRY"
ENV_LOG_LEVEL = "API_KEYS_SERVER_LOG_LEVEL"
ENV_OTLP_ENDPOINT = "API_KEYS_SERVER_OTLP_ENDPOINT"


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    export_to_console: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Everything needed to build and run the server."""

    name: str = "api-keys-server"
    version: str = __version__
    protocol_version: str = "2024-11-05"
    env_file: Path | None = None
    override_env: bool = True
    registry_file: Path | None = None
    log_level: str = "WARNING"
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    @classmethod
    def from_env(cls) -> ServerSettings:
        """Build settings from ``API_KEYS_SERVER_*`` environment variables."""
        env_file = os.environ.get(ENV_ENV_FILE)
        registry_file = os.environ.get(ENV_REGISTRY)
        otlp_endpoint = os.environ.get(ENV_OTLP_ENDPOINT) or None
        return cls(
            env_file=Path(env_file) if env_file else None,
            registry_file=Path(registry_file) if registry_file else None,
            log_level=os.environ.get(ENV_LOG_LEVEL) or "WARNING",
            telemetry=TelemetrySettings(
                enabled=otlp_endpoint is not None,
                otlp_endpoint=otlp_endpoint,
            ),
        )


def load_env_file(path: Path | None = None, *, override: bool = True) -> bool:
    """Load a dotenv file into ``os.environ``.

    Runs once at startup, before the first request.  A missing file is not
    an error.  Returns ``True`` if the file existed and was loaded.
    """
    env_path = path or DEFAULT_ENV_FILE
    if not env_path.is_file():
        logger.debug("No env file at %s, using process environment only", env_path)
        return False
    load_dotenv(env_path, override=override)
    logger.info("Loaded environment from %s", env_path)
    return True
