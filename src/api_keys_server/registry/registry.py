"""KeyRegistry — immutable lookup table of named secrets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from api_keys_server.registry.errors import DuplicateKeyError
from api_keys_server.registry.models import ALL_CATEGORIES, RegistryEntry
from api_keys_server.registry.source import EnvironSource, SecretSource


class KeyRegistry:
    """Maps logical key names to their registry entries.

    Built once at startup and never mutated.  Values are resolved through
    the injected :class:`SecretSource` on every call, so configured-state
    always reflects the source at the time of the call.

    Usage::

        registry = KeyRegistry(entries, source=MappingSource({"OPENAI_API_KEY": "sk-..."}))
        entry = registry.lookup("openai")
        registry.is_configured(entry)  # True
    """

    def __init__(
        self,
        entries: Iterable[RegistryEntry],
        source: SecretSource | None = None,
    ) -> None:
        table: dict[str, RegistryEntry] = {}
        for entry in entries:
            if entry.logical_name in table:
                raise DuplicateKeyError(entry.logical_name)
            table[entry.logical_name] = entry
        self._entries = MappingProxyType(table)
        self._source: SecretSource = source if source is not None else EnvironSource()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def lookup(self, name: str) -> RegistryEntry | None:
        """Return the entry for *name*, or ``None`` if it is not registered."""
        return self._entries.get(name)

    def all_names(self) -> list[str]:
        """Return every logical name in table order."""
        return list(self._entries)

    def filter_by_category(self, category: str) -> list[RegistryEntry]:
        """Return entries in *category*, in table order.

        ``"all"`` matches every entry; an unknown category matches none.
        """
        if category == ALL_CATEGORIES:
            return list(self._entries.values())
        return [e for e in self._entries.values() if e.category.value == category]

    def value_of(self, entry: RegistryEntry) -> str:
        """Current value of the entry's source variable (``""`` when unset)."""
        return self._source.get(entry.source_variable) or ""

    def is_configured(self, entry: RegistryEntry) -> bool:
        return bool(self.value_of(entry))
