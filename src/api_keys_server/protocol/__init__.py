"""MCP protocol — JSON-RPC 2.0 messages, errors and line transport."""

from api_keys_server.protocol.errors import (
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    ToolNotFoundError,
)
from api_keys_server.protocol.models import (
    CallToolParams,
    ContentBlock,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolCallResult,
    ToolDescriptor,
)
from api_keys_server.protocol.transport import LineTransport, StdioTransport

__all__ = [
    "CallToolParams",
    "ContentBlock",
    "InitializeResult",
    "InternalError",
    "InvalidParamsError",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "LineTransport",
    "MethodNotFoundError",
    "ParseError",
    "ProtocolError",
    "StdioTransport",
    "ToolCallResult",
    "ToolDescriptor",
    "ToolNotFoundError",
]
