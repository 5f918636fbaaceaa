"""Tool catalog — name-to-handler routing for ``tools/call``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from api_keys_server.protocol.errors import ToolNotFoundError
from api_keys_server.protocol.models import ToolCallResult, ToolDescriptor
from api_keys_server.registry.registry import KeyRegistry
from api_keys_server.tools.handlers import check_api_key_exists, get_api_key, list_api_keys
from api_keys_server.tools.schemas import category_schema, key_name_schema

ToolHandler = Callable[[KeyRegistry, Mapping[str, Any]], ToolCallResult]
SchemaBuilder = Callable[[KeyRegistry], dict[str, Any]]


@dataclass(frozen=True)
class ToolSpec:
    """A tool's public description plus the function that runs it."""

    name: str
    description: str
    handler: ToolHandler
    schema_builder: SchemaBuilder

    def descriptor(self, registry: KeyRegistry) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.schema_builder(registry),
        )


TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_api_key",
        description=(
            "Retrieve an API key by its name. "
            "Returns the API key value from environment variables."
        ),
        handler=get_api_key,
        schema_builder=lambda registry: key_name_schema(
            registry,
            "The name of the API key to retrieve (e.g., 'openai', 'stripe', 'canva_client_id')",
        ),
    ),
    ToolSpec(
        name="list_api_keys",
        description=(
            "List all available API key names and their descriptions. "
            "Does not return actual key values."
        ),
        handler=list_api_keys,
        schema_builder=lambda _registry: category_schema(),
    ),
    ToolSpec(
        name="check_api_key_exists",
        description=(
            "Check if an API key is configured (has a value set) "
            "without revealing the key itself."
        ),
        handler=check_api_key_exists,
        schema_builder=lambda registry: key_name_schema(
            registry, "The name of the API key to check"
        ),
    ),
)

_TOOL_MAP: dict[str, ToolSpec] = {tool.name: tool for tool in TOOLS}


def build_tool_descriptors(registry: KeyRegistry) -> list[ToolDescriptor]:
    """Return the descriptors served by ``tools/list``."""
    return [tool.descriptor(registry) for tool in TOOLS]


def call_tool(registry: KeyRegistry, name: str, arguments: Mapping[str, Any]) -> ToolCallResult:
    """Route a tool call to its handler.

    Raises:
        ToolNotFoundError: If *name* is not a known tool.
    """
    tool = _TOOL_MAP.get(name)
    if tool is None:
        raise ToolNotFoundError(name)
    return tool.handler(registry, arguments)
