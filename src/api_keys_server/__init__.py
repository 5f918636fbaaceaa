"""API Keys Server — an MCP stdio server exposing environment-backed secrets."""

from __future__ import annotations

__version__ = "1.0.0"
