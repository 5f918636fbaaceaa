"""Secret sources — read-only accessors for secret values.

The registry never touches ``os.environ`` directly; it asks a
:class:`SecretSource`.  Production code uses :class:`EnvironSource`, tests
substitute a :class:`MappingSource`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class SecretSource(Protocol):
    """Looks up the current value of a source variable."""

    def get(self, name: str) -> str | None: ...


class EnvironSource:
    """Reads the process environment at call time."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)


class MappingSource:
    """Serves values from a fixed in-memory mapping."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)
