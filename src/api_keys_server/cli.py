"""API Keys Server CLI entrypoint."""

from __future__ import annotations

import click

from api_keys_server import __version__


@click.group()
@click.version_option(version=__version__, prog_name="api-keys-server")
def main() -> None:
    """API Keys Server — MCP stdio server for environment-backed API keys."""


# Register subcommands
from api_keys_server.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
