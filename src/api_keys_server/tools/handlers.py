"""Tool handlers — the three key tools exposed over ``tools/call``.

Every handler returns a :class:`ToolCallResult`.  Domain conditions (unknown
key, unset variable) are reported through ``is_error`` in the result and
never as JSON-RPC errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api_keys_server.protocol.models import ToolCallResult
from api_keys_server.registry.models import ALL_CATEGORIES, CATEGORY_ORDER, CATEGORY_TITLES

if TYPE_CHECKING:
    from api_keys_server.registry.models import RegistryEntry
    from api_keys_server.registry.registry import KeyRegistry

MASK_SEPARATOR = "..."
FULL_MASK = "****"
MIN_PARTIAL_MASK_LENGTH = 12
_VISIBLE_CHARS = 4

CONFIGURED_MARK = "✅"
UNCONFIGURED_MARK = "❌"


def mask_value(value: str) -> str:
    """Mask a secret for display.

    Values of at least 12 characters keep their first and last four
    characters; shorter values are replaced entirely.
    """
    if len(value) < MIN_PARTIAL_MASK_LENGTH:
        return FULL_MASK
    return value[:_VISIBLE_CHARS] + MASK_SEPARATOR + value[-_VISIBLE_CHARS:]


def _resolve_key(registry: KeyRegistry, arguments: Mapping[str, Any]) -> RegistryEntry | ToolCallResult:
    """Validate ``key_name`` and look it up, or return the failure result."""
    key_name = arguments.get("key_name")
    if not isinstance(key_name, str):
        return ToolCallResult.failure("Error: key_name is required")
    entry = registry.lookup(key_name)
    if entry is None:
        return ToolCallResult.failure(f"Error: Unknown API key name: {key_name}")
    return entry


def get_api_key(registry: KeyRegistry, arguments: Mapping[str, Any]) -> ToolCallResult:
    """Return the raw value of a configured key."""
    entry = _resolve_key(registry, arguments)
    if isinstance(entry, ToolCallResult):
        return entry
    key_name = entry.logical_name

    value = registry.value_of(entry)
    if not value:
        return ToolCallResult.failure(
            f"API key '{key_name}' is not configured. "
            f"Set the {entry.source_variable} environment variable."
        )
    return ToolCallResult.text(value)


def list_api_keys(registry: KeyRegistry, arguments: Mapping[str, Any]) -> ToolCallResult:
    """List registered keys grouped by category, without their values."""
    category = arguments.get("category")
    if not isinstance(category, str) or not category:
        category = ALL_CATEGORIES

    lines = ["Available API Keys:", ""]
    for cat in CATEGORY_ORDER:
        if category not in (ALL_CATEGORIES, cat.value):
            continue
        lines.append(f"{CATEGORY_TITLES[cat]}:")
        for entry in registry.filter_by_category(cat.value):
            mark = CONFIGURED_MARK if registry.is_configured(entry) else UNCONFIGURED_MARK
            lines.append(
                f"  {mark} {entry.logical_name} - {entry.description} (env: {entry.source_variable})"
            )
        lines.append("")
    return ToolCallResult.text("\n".join(lines) + "\n")


def check_api_key_exists(registry: KeyRegistry, arguments: Mapping[str, Any]) -> ToolCallResult:
    """Report whether a key is configured, showing only a masked preview.

    An unconfigured key is an informational answer here, not a failure.
    """
    entry = _resolve_key(registry, arguments)
    if isinstance(entry, ToolCallResult):
        return entry
    key_name = entry.logical_name

    value = registry.value_of(entry)
    if value:
        return ToolCallResult.text(
            f"{CONFIGURED_MARK} API key '{key_name}' is configured (value: {mask_value(value)})"
        )
    return ToolCallResult.text(
        f"{UNCONFIGURED_MARK} API key '{key_name}' is NOT configured. "
        f"Set {entry.source_variable} environment variable."
    )
