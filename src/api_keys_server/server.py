"""Server assembly — startup wiring for the stdio MCP server."""

from __future__ import annotations

import logging

from api_keys_server.config import ServerSettings, load_env_file
from api_keys_server.protocol.dispatcher import Dispatcher
from api_keys_server.protocol.transport import LineTransport, StdioTransport
from api_keys_server.registry.registry import KeyRegistry
from api_keys_server.registry.registry_data import DEFAULT_ENTRIES, load_registry_file
from api_keys_server.registry.source import SecretSource  # noqa: TC001
from api_keys_server.utils.telemetry import configure_telemetry

logger = logging.getLogger(__name__)


def build_registry(settings: ServerSettings, source: SecretSource | None = None) -> KeyRegistry:
    """Build the registry from the configured file, or the default table."""
    if settings.registry_file is not None:
        entries = load_registry_file(settings.registry_file)
        logger.info("Loaded %d key(s) from %s", len(entries), settings.registry_file)
        return KeyRegistry(entries, source=source)
    return KeyRegistry(DEFAULT_ENTRIES, source=source)


def build_server(settings: ServerSettings | None = None, source: SecretSource | None = None) -> Dispatcher:
    """Load the environment, build the registry and return a ready dispatcher.

    The env file is read exactly once here, before any request is handled.
    """
    settings = settings or ServerSettings()
    load_env_file(settings.env_file, override=settings.override_env)

    if settings.telemetry.enabled:
        configure_telemetry(
            service_name=settings.name,
            export_to_console=settings.telemetry.export_to_console,
            otlp_endpoint=settings.telemetry.otlp_endpoint,
        )

    registry = build_registry(settings, source=source)
    logger.debug("Serving %d registered key(s)", len(registry))
    return Dispatcher(registry, settings)


def run_stdio(
    settings: ServerSettings | None = None,
    transport: LineTransport | None = None,
) -> int:
    """Serve requests until the input stream closes; returns responses written."""
    dispatcher = build_server(settings)
    return dispatcher.serve(transport or StdioTransport())
