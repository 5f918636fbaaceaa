"""Registry models — categories and immutable key entries."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Grouping used for filtering and listing keys."""

    LLM = "llm"
    SAAS = "saas"
    CANVA = "canva"
    INTERNAL = "internal"


# Listing order; also the order of the category enum in tool schemas.
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.LLM,
    Category.SAAS,
    Category.CANVA,
    Category.INTERNAL,
)

ALL_CATEGORIES = "all"

CATEGORY_TITLES: dict[Category, str] = {
    Category.LLM: "🤖 LLM APIs",
    Category.SAAS: "☁️ SaaS APIs",
    Category.CANVA: "🎨 Canva APIs",
    Category.INTERNAL: "🔧 Internal/Custom",
}


class RegistryEntry(BaseModel):
    """A single named secret and where its value lives.

    Registry files use the shorter ``name`` / ``env_var`` keys, accepted
    here as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    logical_name: str = Field(alias="name", min_length=1)
    source_variable: str = Field(alias="env_var", min_length=1)
    description: str = ""
    category: Category
