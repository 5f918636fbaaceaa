"""Error types for the key registry."""


class RegistryError(Exception):
    """Base error for registry construction and loading failures."""


class DuplicateKeyError(RegistryError):
    """Two entries share the same logical name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate API key name: {name}")
