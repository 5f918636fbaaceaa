"""Static key registry data.

Contains the default key table and helpers to build a ``KeyRegistry``
from it or from a YAML registry file.
"""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Any

import yaml
from pydantic import ValidationError

from api_keys_server.registry.errors import RegistryError
from api_keys_server.registry.models import Category, RegistryEntry
from api_keys_server.registry.registry import KeyRegistry
from api_keys_server.registry.source import SecretSource  # noqa: TC001

# ---------------------------------------------------------------------------
# Default key table
# ---------------------------------------------------------------------------


def _entry(name: str, env_var: str, description: str, category: Category) -> RegistryEntry:
    return RegistryEntry(
        logical_name=name,
        source_variable=env_var,
        description=description,
        category=category,
    )


DEFAULT_ENTRIES: tuple[RegistryEntry, ...] = (
    # LLM APIs
    _entry("openai", "OPENAI_API_KEY", "OpenAI API key for GPT models", Category.LLM),
    _entry("anthropic", "ANTHROPIC_API_KEY", "Anthropic API key for Claude models", Category.LLM),
    _entry("google_ai", "GOOGLE_AI_API_KEY", "Google AI API key for Gemini models", Category.LLM),
    _entry("cohere", "COHERE_API_KEY", "Cohere API key", Category.LLM),
    # SaaS APIs
    _entry("stripe", "STRIPE_API_KEY", "Stripe API key for payments", Category.SAAS),
    _entry("stripe_webhook", "STRIPE_WEBHOOK_SECRET", "Stripe webhook signing secret", Category.SAAS),
    _entry("twilio_sid", "TWILIO_ACCOUNT_SID", "Twilio Account SID", Category.SAAS),
    _entry("twilio_token", "TWILIO_AUTH_TOKEN", "Twilio Auth Token", Category.SAAS),
    _entry("sendgrid", "SENDGRID_API_KEY", "SendGrid API key for emails", Category.SAAS),
    _entry("aws_access_key", "AWS_ACCESS_KEY_ID", "AWS Access Key ID", Category.SAAS),
    _entry("aws_secret_key", "AWS_SECRET_ACCESS_KEY", "AWS Secret Access Key", Category.SAAS),
    # Canva
    _entry("canva_client_id", "CANVA_CLIENT_ID", "Canva OAuth Client ID", Category.CANVA),
    _entry("canva_client_secret", "CANVA_CLIENT_SECRET", "Canva OAuth Client Secret", Category.CANVA),
    _entry("canva_app_id", "CANVA_APP_ID", "Canva App ID", Category.CANVA),
    # Custom / internal
    _entry("database_url", "DATABASE_URL", "Database connection string", Category.INTERNAL),
    _entry("redis_url", "REDIS_URL", "Redis connection URL", Category.INTERNAL),
    _entry("jwt_secret", "JWT_SECRET", "JWT signing secret", Category.INTERNAL),
    _entry("app_secret", "APP_SECRET", "Application secret key", Category.INTERNAL),
)


def build_default_registry(source: SecretSource | None = None) -> KeyRegistry:
    """Return a :class:`KeyRegistry` pre-loaded with :data:`DEFAULT_ENTRIES`."""
    return KeyRegistry(DEFAULT_ENTRIES, source=source)


# ---------------------------------------------------------------------------
# Registry files
# ---------------------------------------------------------------------------


def parse_registry(raw: str) -> list[RegistryEntry]:
    """Parse registry YAML into validated entries.

    Expected shape::

        keys:
          - name: openai
            env_var: OPENAI_API_KEY
            description: OpenAI API key for GPT models
            category: llm

    Raises:
        RegistryError: On YAML parse errors or schema validation failures.
    """
    try:
        data: Any = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RegistryError(f"YAML parse error: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("keys"), list):
        raise RegistryError("Registry YAML must be a mapping with a 'keys' list")

    entries: list[RegistryEntry] = []
    for index, item in enumerate(data["keys"]):
        try:
            entries.append(RegistryEntry.model_validate(item))
        except ValidationError as exc:
            raise RegistryError(f"Invalid registry entry #{index}: {exc}") from exc
    return entries


def load_registry_file(path: Path) -> list[RegistryEntry]:
    """Read and parse the registry file at *path*."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RegistryError(f"Cannot read {path}: {exc}") from exc
    return parse_registry(raw)
