"""``api-keys-server serve`` — run the MCP server over stdin/stdout."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from api_keys_server.cli_commands._output import err_console


def configure_logging(level: str) -> None:
    """Send all log output to stderr; stdout is the JSON-RPC transport."""
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


@click.command()
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Dotenv file loaded once at startup (default: ./.env if present).",
)
@click.option(
    "--no-override-env",
    is_flag=True,
    help="Keep existing environment values instead of overriding them from the env file.",
)
@click.option(
    "--registry",
    "registry_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file replacing the built-in key table.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for stderr output.",
)
@click.option("--telemetry", is_flag=True, help="Export tracing spans to stderr.")
@click.option("--otlp-endpoint", default=None, help="Export tracing spans via OTLP/gRPC.")
def serve(
    env_file: Path | None,
    no_override_env: bool,
    registry_file: Path | None,
    log_level: str | None,
    telemetry: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve newline-delimited JSON-RPC requests on stdin/stdout."""
    from api_keys_server.config import ServerSettings, TelemetrySettings
    from api_keys_server.registry.errors import RegistryError
    from api_keys_server.server import run_stdio

    settings = ServerSettings.from_env()
    updates: dict[str, object] = {"override_env": not no_override_env}
    if env_file is not None:
        updates["env_file"] = env_file
    if registry_file is not None:
        updates["registry_file"] = registry_file
    if log_level is not None:
        updates["log_level"] = log_level.upper()
    if telemetry or otlp_endpoint:
        updates["telemetry"] = TelemetrySettings(
            enabled=True,
            export_to_console=telemetry,
            otlp_endpoint=otlp_endpoint or settings.telemetry.otlp_endpoint,
        )
    settings = settings.model_copy(update=updates)

    configure_logging(settings.log_level)

    try:
        run_stdio(settings)
    except RegistryError as exc:
        err_console.print(f"[red]Registry error:[/red] {exc}")
        sys.exit(1)
    except ImportError as exc:
        err_console.print(f"[red]Telemetry error:[/red] {exc}")
        sys.exit(1)
