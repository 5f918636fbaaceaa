"""JSON-RPC error types for the protocol layer.

Each error carries its JSON-RPC ``code``; the dispatcher converts any
:class:`ProtocolError` into an ``error`` response in one place.
"""

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all protocol-level failures."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ParseError(ProtocolError):
    """The input line is not a decodable JSON-RPC request."""

    code = PARSE_ERROR

    def __init__(self) -> None:
        super().__init__("Parse error")


class InvalidParamsError(ProtocolError):
    """The request params do not match the method's expected shape."""

    code = INVALID_PARAMS

    def __init__(self) -> None:
        super().__init__("Invalid params")


class MethodNotFoundError(ProtocolError):
    """No handler exists for the requested method."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class ToolNotFoundError(ProtocolError):
    """``tools/call`` named a tool that does not exist."""

    code = METHOD_NOT_FOUND

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InternalError(ProtocolError):
    """A handler failed unexpectedly."""

    def __init__(self) -> None:
        super().__init__("Internal error")
