"""Tests for tool descriptors and name-based routing."""

import pytest

from api_keys_server.protocol.errors import ToolNotFoundError
from api_keys_server.registry.models import Category, RegistryEntry
from api_keys_server.registry.registry import KeyRegistry
from api_keys_server.registry.registry_data import build_default_registry
from api_keys_server.registry.source import MappingSource
from api_keys_server.tools.catalog import TOOLS, build_tool_descriptors, call_tool


class TestBuildToolDescriptors:
    def test_three_tools_in_order(self) -> None:
        descriptors = build_tool_descriptors(build_default_registry(MappingSource()))
        assert [d.name for d in descriptors] == [
            "get_api_key",
            "list_api_keys",
            "check_api_key_exists",
        ]

    def test_key_name_enum_matches_registry(self) -> None:
        registry = build_default_registry(MappingSource())
        descriptors = {d.name: d for d in build_tool_descriptors(registry)}
        for tool in ("get_api_key", "check_api_key_exists"):
            schema = descriptors[tool].input_schema
            assert set(schema["properties"]["key_name"]["enum"]) == set(registry.all_names())
            assert schema["required"] == ["key_name"]

    def test_key_name_enum_follows_custom_registry(self) -> None:
        registry = KeyRegistry(
            [RegistryEntry(logical_name="only_key", source_variable="ONLY", category=Category.SAAS)],
            source=MappingSource(),
        )
        descriptors = {d.name: d for d in build_tool_descriptors(registry)}
        assert descriptors["get_api_key"].input_schema["properties"]["key_name"]["enum"] == ["only_key"]

    def test_category_enum(self) -> None:
        descriptors = {d.name: d for d in build_tool_descriptors(build_default_registry(MappingSource()))}
        schema = descriptors["list_api_keys"].input_schema
        assert schema["properties"]["category"]["enum"] == ["llm", "saas", "canva", "internal", "all"]
        assert schema["required"] == []

    def test_descriptions_present(self) -> None:
        assert all(tool.description for tool in TOOLS)


class TestCallTool:
    def test_routes_by_name(self) -> None:
        registry = build_default_registry(MappingSource({"REDIS_URL": "redis://localhost:6379/0"}))
        result = call_tool(registry, "get_api_key", {"key_name": "redis_url"})
        assert result.content[0].text == "redis://localhost:6379/0"

    def test_unknown_tool(self) -> None:
        with pytest.raises(ToolNotFoundError, match="Unknown tool: nonexistent_tool") as exc_info:
            call_tool(build_default_registry(MappingSource()), "nonexistent_tool", {})
        assert exc_info.value.code == -32601
