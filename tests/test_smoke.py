"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import api_keys_server

    assert api_keys_server.__version__ == "1.0.0"


def test_cli_entrypoint() -> None:
    from api_keys_server.cli import main

    assert callable(main)


def test_package_exports() -> None:
    from api_keys_server.protocol import JsonRpcRequest, StdioTransport, ToolCallResult
    from api_keys_server.registry import KeyRegistry, build_default_registry
    from api_keys_server.tools import TOOLS, call_tool

    assert JsonRpcRequest is not None
    assert StdioTransport is not None
    assert ToolCallResult is not None
    assert KeyRegistry is not None
    assert callable(build_default_registry)
    assert len(TOOLS) == 3
    assert callable(call_tool)
