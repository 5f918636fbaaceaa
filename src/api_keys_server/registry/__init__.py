"""Key registry — the fixed table of named secrets and their sources."""

from api_keys_server.registry.errors import DuplicateKeyError, RegistryError
from api_keys_server.registry.models import (
    ALL_CATEGORIES,
    CATEGORY_ORDER,
    CATEGORY_TITLES,
    Category,
    RegistryEntry,
)
from api_keys_server.registry.registry import KeyRegistry
from api_keys_server.registry.registry_data import (
    DEFAULT_ENTRIES,
    build_default_registry,
    load_registry_file,
    parse_registry,
)
from api_keys_server.registry.source import EnvironSource, MappingSource, SecretSource

__all__ = [
    "ALL_CATEGORIES",
    "CATEGORY_ORDER",
    "CATEGORY_TITLES",
    "DEFAULT_ENTRIES",
    "Category",
    "DuplicateKeyError",
    "EnvironSource",
    "KeyRegistry",
    "MappingSource",
    "RegistryEntry",
    "RegistryError",
    "SecretSource",
    "build_default_registry",
    "load_registry_file",
    "parse_registry",
]
