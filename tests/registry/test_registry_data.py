"""Tests for the default key table and YAML registry files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from api_keys_server.registry.errors import RegistryError
from api_keys_server.registry.models import Category
from api_keys_server.registry.registry_data import (
    DEFAULT_ENTRIES,
    build_default_registry,
    load_registry_file,
    parse_registry,
)
from api_keys_server.registry.source import MappingSource

if TYPE_CHECKING:
    from pathlib import Path

_VALID_YAML = """\
keys:
  - name: openai
    env_var: OPENAI_API_KEY
    description: OpenAI API key
    category: llm
  - name: internal_token
    env_var: INTERNAL_TOKEN
    category: internal
"""


class TestDefaultEntries:
    def test_entry_count(self) -> None:
        assert len(DEFAULT_ENTRIES) == 18

    def test_names_unique(self) -> None:
        names = [e.logical_name for e in DEFAULT_ENTRIES]
        assert len(names) == len(set(names))

    def test_every_category_populated(self) -> None:
        categories = {e.category for e in DEFAULT_ENTRIES}
        assert categories == set(Category)

    def test_known_mappings(self) -> None:
        registry = build_default_registry(MappingSource())
        expected = {
            "openai": "OPENAI_API_KEY",
            "stripe": "STRIPE_API_KEY",
            "canva_client_id": "CANVA_CLIENT_ID",
            "jwt_secret": "JWT_SECRET",
            "aws_secret_key": "AWS_SECRET_ACCESS_KEY",
        }
        for name, env_var in expected.items():
            entry = registry.lookup(name)
            assert entry is not None
            assert entry.source_variable == env_var

    def test_category_counts(self) -> None:
        registry = build_default_registry(MappingSource())
        assert len(registry.filter_by_category("llm")) == 4
        assert len(registry.filter_by_category("saas")) == 7
        assert len(registry.filter_by_category("canva")) == 3
        assert len(registry.filter_by_category("internal")) == 4


class TestParseRegistry:
    def test_parse_valid(self) -> None:
        entries = parse_registry(_VALID_YAML)
        assert [e.logical_name for e in entries] == ["openai", "internal_token"]
        assert entries[1].category is Category.INTERNAL

    def test_invalid_yaml(self) -> None:
        with pytest.raises(RegistryError, match="YAML parse error"):
            parse_registry("{{{{invalid")

    def test_missing_keys_list(self) -> None:
        with pytest.raises(RegistryError, match="'keys' list"):
            parse_registry("- a\n- b\n")

    def test_invalid_entry(self) -> None:
        raw = "keys:\n  - name: x\n    category: llm\n"
        with pytest.raises(RegistryError, match="#0"):
            parse_registry(raw)


class TestLoadRegistryFile:
    def test_load(self, tmp_path: Path) -> None:
        f = tmp_path / "keys.yaml"
        f.write_text(_VALID_YAML)
        entries = load_registry_file(f)
        assert len(entries) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RegistryError, match="Cannot read"):
            load_registry_file(tmp_path / "missing.yaml")
