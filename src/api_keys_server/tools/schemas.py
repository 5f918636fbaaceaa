"""Input schemas for the key tools, generated from the live registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api_keys_server.registry.models import ALL_CATEGORIES, CATEGORY_ORDER

if TYPE_CHECKING:
    from api_keys_server.registry.registry import KeyRegistry


def category_choices() -> list[str]:
    """Allowed ``category`` values: every category, then ``"all"``."""
    return [cat.value for cat in CATEGORY_ORDER] + [ALL_CATEGORIES]


def key_name_schema(registry: KeyRegistry, description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "key_name": {
                "type": "string",
                "description": description,
                "enum": registry.all_names(),
            },
        },
        "required": ["key_name"],
    }


def category_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "category": {
                "type": "string",
                "description": "Filter by category: 'llm', 'saas', 'canva', 'internal', or 'all'",
                "enum": category_choices(),
            },
        },
        "required": [],
    }
