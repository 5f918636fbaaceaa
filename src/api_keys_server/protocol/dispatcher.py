"""Dispatcher — decodes request lines and routes them to method handlers.

One line in, at most one response out.  Requests carrying an ``id`` always
get exactly one response with that id; notifications get none.  Protocol
failures become JSON-RPC ``error`` responses, tool-level failures travel
inside a successful ``tools/call`` result.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from api_keys_server.config import ServerSettings
from api_keys_server.protocol.errors import (
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
)
from api_keys_server.protocol.models import (
    CallToolParams,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
)
from api_keys_server.tools.catalog import build_tool_descriptors, call_tool
from api_keys_server.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_NOTIFICATION,
    ATTR_REQUEST_ID,
    ATTR_TOOL_IS_ERROR,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from opentelemetry.trace import Span

    from api_keys_server.protocol.transport import LineTransport
    from api_keys_server.registry.registry import KeyRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

# Methods that never produce a response, whether or not an id is present.
_SILENT_METHODS = frozenset({"initialized"})


def _reject_constant(token: str) -> Any:
    """``NaN`` and ``Infinity`` are not JSON; ``json.loads`` accepts them by default."""
    raise ValueError(f"invalid JSON constant: {token}")


class Dispatcher:
    """Routes JSON-RPC requests to the MCP method handlers.

    Stateless between requests: there is no session, and ``tools/call`` is
    accepted before ``initialize``.

    Usage::

        dispatcher = Dispatcher(build_default_registry())
        dispatcher.serve(StdioTransport())
    """

    def __init__(self, registry: KeyRegistry, settings: ServerSettings | None = None) -> None:
        self._registry = registry
        self._settings = settings or ServerSettings()

    @property
    def registry(self) -> KeyRegistry:
        return self._registry

    def serve(self, transport: LineTransport) -> int:
        """Handle lines until the input stream ends.

        Responses are written as soon as each request is handled, in input
        order.  Returns the number of responses written.
        """
        written = 0
        while True:
            line = transport.receive()
            if line is None:
                break
            response = self.handle_line(line)
            if response is not None:
                transport.send(response)
                written += 1
        logger.debug("Input stream closed after %d response(s)", written)
        return written

    def handle_line(self, line: str) -> dict[str, Any] | None:
        """Handle one framed line and return the wire response, if any."""
        if not line.strip():
            return None

        try:
            request = self._decode(line)
        except ParseError as exc:
            logger.info("Rejected undecodable request line")
            return self._error_response(None, exc).to_wire()

        with _tracer.start_as_current_span("mcp.request") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            span.set_attribute(ATTR_NOTIFICATION, request.is_notification)
            if request.id is not None:
                span.set_attribute(ATTR_REQUEST_ID, str(request.id))
            response = self._handle_request(request, span)

        if response is None or request.is_notification:
            return None
        return response.to_wire()

    # ------------------------------------------------------------------
    # Decoding and routing
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(line: str) -> JsonRpcRequest:
        try:
            data = json.loads(line, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            raise ParseError from exc
        try:
            return JsonRpcRequest.model_validate(data)
        except ValidationError as exc:
            raise ParseError from exc

    def _handle_request(self, request: JsonRpcRequest, span: Span) -> JsonRpcResponse | None:
        logger.debug("Handling %s (id=%r)", request.method or "<no method>", request.id)
        if request.method in _SILENT_METHODS:
            return None

        try:
            result = self._route(request, span)
        except ProtocolError as exc:
            logger.info("Request %r failed: %s", request.id, exc.message)
            span.set_attribute(ATTR_ERROR_CODE, exc.code)
            return self._error_response(request.id, exc)
        except Exception:
            logger.exception("Unhandled error while processing %s", request.method)
            span.set_attribute(ATTR_ERROR_CODE, InternalError.code)
            return self._error_response(request.id, InternalError())
        return JsonRpcResponse(id=request.id, result=result)

    def _route(self, request: JsonRpcRequest, span: Span) -> dict[str, Any]:
        if request.method == "initialize":
            return self._initialize()
        if request.method == "tools/list":
            return self._tools_list()
        if request.method == "tools/call":
            return self._tools_call(request, span)
        raise MethodNotFoundError(request.method)

    # ------------------------------------------------------------------
    # Method handlers
    # ------------------------------------------------------------------

    def _initialize(self) -> dict[str, Any]:
        result = InitializeResult(
            protocol_version=self._settings.protocol_version,
            server_info=ServerInfo(name=self._settings.name, version=self._settings.version),
        )
        return result.model_dump(by_alias=True)

    def _tools_list(self) -> dict[str, Any]:
        tools = build_tool_descriptors(self._registry)
        return {"tools": [tool.model_dump(by_alias=True) for tool in tools]}

    def _tools_call(self, request: JsonRpcRequest, span: Span) -> dict[str, Any]:
        # Absent params is malformed; explicit null params reads as an empty call.
        if "params" not in request.model_fields_set:
            raise InvalidParamsError
        params = {} if request.params is None else request.params
        try:
            call = CallToolParams.model_validate(params)
        except ValidationError as exc:
            raise InvalidParamsError from exc

        span.set_attribute(ATTR_TOOL_NAME, call.name)
        outcome = call_tool(self._registry, call.name, call.arguments)
        span.set_attribute(ATTR_TOOL_IS_ERROR, outcome.is_error)
        return outcome.model_dump(by_alias=True)

    @staticmethod
    def _error_response(request_id: Any, exc: ProtocolError) -> JsonRpcResponse:
        return JsonRpcResponse(
            id=request_id,
            error=JsonRpcError(code=exc.code, message=exc.message),
        )
