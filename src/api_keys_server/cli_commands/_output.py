"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from api_keys_server.registry.models import ALL_CATEGORIES, CATEGORY_ORDER

if TYPE_CHECKING:
    from api_keys_server.registry.registry import KeyRegistry

console = Console()
err_console = Console(stderr=True)


def print_keys_table(registry: KeyRegistry, category: str, *, as_json: bool = False) -> None:
    """Pretty-print registered keys and whether each is configured.

    Values are never printed.
    """
    rows = [
        {
            "name": entry.logical_name,
            "category": entry.category.value,
            "env_var": entry.source_variable,
            "description": entry.description,
            "configured": registry.is_configured(entry),
        }
        for cat in CATEGORY_ORDER
        for entry in registry.filter_by_category(cat.value)
        if category in (ALL_CATEGORIES, cat.value)
    ]

    if as_json:
        console.print_json(json.dumps(rows))
        return

    if not rows:
        console.print(f"[yellow]No keys in category: {category}[/yellow]")
        return

    table = Table(title="API Keys")
    table.add_column("Name", style="cyan")
    table.add_column("Category")
    table.add_column("Env Var")
    table.add_column("Description")
    table.add_column("Configured")

    for row in rows:
        table.add_row(
            str(row["name"]),
            str(row["category"]),
            str(row["env_var"]),
            _truncate(str(row["description"])),
            "[green]yes[/green]" if row["configured"] else "[red]no[/red]",
        )

    console.print(table)


def _truncate(text: str, max_len: int = 60) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
