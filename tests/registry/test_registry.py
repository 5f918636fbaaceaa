"""Tests for KeyRegistry lookup, filtering and value resolution."""

import pytest

from api_keys_server.registry.errors import DuplicateKeyError
from api_keys_server.registry.models import Category, RegistryEntry
from api_keys_server.registry.registry import KeyRegistry
from api_keys_server.registry.source import EnvironSource, MappingSource


def _entries() -> list[RegistryEntry]:
    return [
        RegistryEntry(logical_name="openai", source_variable="OPENAI_API_KEY", category=Category.LLM),
        RegistryEntry(logical_name="stripe", source_variable="STRIPE_API_KEY", category=Category.SAAS),
        RegistryEntry(logical_name="cohere", source_variable="COHERE_API_KEY", category=Category.LLM),
    ]


class TestRegistryEntry:
    def test_is_frozen(self) -> None:
        entry = _entries()[0]
        with pytest.raises(Exception):
            entry.logical_name = "changed"  # type: ignore[misc]

    def test_accepts_file_aliases(self) -> None:
        entry = RegistryEntry.model_validate(
            {"name": "redis_url", "env_var": "REDIS_URL", "category": "internal"}
        )
        assert entry.logical_name == "redis_url"
        assert entry.source_variable == "REDIS_URL"
        assert entry.category is Category.INTERNAL
        assert entry.description == ""

    def test_rejects_unknown_category(self) -> None:
        with pytest.raises(Exception):
            RegistryEntry.model_validate({"name": "x", "env_var": "X", "category": "crypto"})


class TestKeyRegistry:
    def test_lookup(self) -> None:
        registry = KeyRegistry(_entries(), source=MappingSource())
        entry = registry.lookup("stripe")
        assert entry is not None
        assert entry.source_variable == "STRIPE_API_KEY"

    def test_lookup_missing(self) -> None:
        registry = KeyRegistry(_entries(), source=MappingSource())
        assert registry.lookup("nope") is None

    def test_all_names_in_table_order(self) -> None:
        registry = KeyRegistry(_entries(), source=MappingSource())
        assert registry.all_names() == ["openai", "stripe", "cohere"]

    def test_filter_by_category(self) -> None:
        registry = KeyRegistry(_entries(), source=MappingSource())
        names = [e.logical_name for e in registry.filter_by_category("llm")]
        assert names == ["openai", "cohere"]

    def test_filter_all(self) -> None:
        registry = KeyRegistry(_entries(), source=MappingSource())
        assert len(registry.filter_by_category("all")) == 3

    def test_filter_unknown_category(self) -> None:
        registry = KeyRegistry(_entries(), source=MappingSource())
        assert registry.filter_by_category("crypto") == []

    def test_duplicate_names_rejected(self) -> None:
        entries = _entries() + [
            RegistryEntry(logical_name="openai", source_variable="OTHER", category=Category.LLM)
        ]
        with pytest.raises(DuplicateKeyError, match="openai"):
            KeyRegistry(entries)

    def test_container_protocols(self) -> None:
        registry = KeyRegistry(_entries(), source=MappingSource())
        assert len(registry) == 3
        assert "openai" in registry
        assert "anthropic" not in registry
        assert [e.logical_name for e in registry] == ["openai", "stripe", "cohere"]

    def test_value_of_and_is_configured(self) -> None:
        registry = KeyRegistry(
            _entries(), source=MappingSource({"OPENAI_API_KEY": "sk-test", "STRIPE_API_KEY": ""})
        )
        openai = registry.lookup("openai")
        stripe = registry.lookup("stripe")
        cohere = registry.lookup("cohere")
        assert openai is not None and stripe is not None and cohere is not None
        assert registry.value_of(openai) == "sk-test"
        assert registry.is_configured(openai) is True
        assert registry.value_of(stripe) == ""
        assert registry.is_configured(stripe) is False
        assert registry.is_configured(cohere) is False

    def test_defaults_to_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "from-env")
        registry = KeyRegistry(_entries())
        entry = registry.lookup("openai")
        assert entry is not None
        assert registry.value_of(entry) == "from-env"


class TestSecretSources:
    def test_environ_source_reads_live(self, monkeypatch: pytest.MonkeyPatch) -> None:
        source = EnvironSource()
        monkeypatch.delenv("API_KEYS_TEST_VAR", raising=False)
        assert source.get("API_KEYS_TEST_VAR") is None
        monkeypatch.setenv("API_KEYS_TEST_VAR", "now-set")
        assert source.get("API_KEYS_TEST_VAR") == "now-set"

    def test_mapping_source_copies_input(self) -> None:
        values = {"A": "1"}
        source = MappingSource(values)
        values["A"] = "2"
        assert source.get("A") == "1"
        assert source.get("B") is None
