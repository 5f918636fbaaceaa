"""``api-keys-server keys`` — inspect the key registry without revealing values."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from api_keys_server.cli_commands._output import console, print_keys_table
from api_keys_server.registry.models import ALL_CATEGORIES, CATEGORY_ORDER


@click.command()
@click.option(
    "--category",
    "-c",
    type=click.Choice([cat.value for cat in CATEGORY_ORDER] + [ALL_CATEGORIES]),
    default=ALL_CATEGORIES,
    help="Only show keys in this category.",
)
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Dotenv file to load before checking (default: ./.env if present).",
)
@click.option(
    "--registry",
    "registry_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file replacing the built-in key table.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def keys(category: str, env_file: Path | None, registry_file: Path | None, as_json: bool) -> None:
    """List registered API keys and whether each is configured."""
    from api_keys_server.config import ServerSettings, load_env_file
    from api_keys_server.registry.errors import RegistryError
    from api_keys_server.server import build_registry

    settings = ServerSettings(env_file=env_file, registry_file=registry_file)
    load_env_file(settings.env_file, override=settings.override_env)

    try:
        registry = build_registry(settings)
    except RegistryError as exc:
        console.print(f"[red]Registry error:[/red] {exc}")
        sys.exit(1)

    print_keys_table(registry, category, as_json=as_json)
