"""MCP models — JSON-RPC 2.0 messages and tool payloads.

Implements the subset of the Model Context Protocol used by this server:
``initialize``, ``tools/list`` and ``tools/call``.
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator, model_validator

# Request ids may be numbers or strings; ``None`` marks a notification.
RequestId = Optional[Union[StrictInt, StrictFloat, StrictStr]]

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification."""

    jsonrpc: Literal["2.0"]
    id: RequestId = None
    method: StrictStr = ""
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return self.id is None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response carrying exactly one of result or error."""

    jsonrpc: str = "2.0"
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    def to_wire(self) -> dict[str, Any]:
        """Render the message as written to the transport.

        ``id`` is always present (``null`` for parse errors); only the
        populated outcome member is included.
        """
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    """Result of the ``initialize`` handshake."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(alias="protocolVersion")
    capabilities: dict[str, Any] = Field(
        default_factory=lambda: {"tools": {"listChanged": False}}
    )
    server_info: ServerInfo = Field(alias="serverInfo")


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class CallToolParams(BaseModel):
    """Params of a ``tools/call`` request."""

    name: StrictStr = ""
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("arguments", mode="before")
    @classmethod
    def _null_arguments(cls, value: Any) -> Any:
        return {} if value is None else value


class ContentBlock(BaseModel):
    """A single piece of tool output."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Outcome of a tool call.

    ``is_error`` marks a tool-level failure reported inside a successful
    JSON-RPC result, as opposed to a protocol-level ``error`` response.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: list[ContentBlock] = Field(default_factory=list)
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def text(cls, text: str) -> ToolCallResult:
        return cls(content=[ContentBlock(text=text)])

    @classmethod
    def failure(cls, text: str) -> ToolCallResult:
        return cls(content=[ContentBlock(text=text)], is_error=True)
