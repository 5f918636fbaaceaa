"""Key tools — ``get_api_key``, ``list_api_keys`` and ``check_api_key_exists``."""

from api_keys_server.tools.catalog import TOOLS, ToolSpec, build_tool_descriptors, call_tool
from api_keys_server.tools.handlers import (
    check_api_key_exists,
    get_api_key,
    list_api_keys,
    mask_value,
)

__all__ = [
    "TOOLS",
    "ToolSpec",
    "build_tool_descriptors",
    "call_tool",
    "check_api_key_exists",
    "get_api_key",
    "list_api_keys",
    "mask_value",
]
