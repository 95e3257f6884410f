"""Classified failure types for the GraphQL MCP server.

Every error that leaves the executor, the tool handlers or the tool registry
is a ``ClassifiedFailure``. The ``kind`` is drawn from a closed set and maps
onto a JSON-RPC error code when the failure crosses the MCP boundary.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Closed taxonomy of failures surfaced to MCP clients."""

    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"
    VALIDATION_ERROR = "validation_error"
    UNKNOWN_OPERATION = "unknown_operation"
    UNEXPECTED = "unexpected"


# JSON-RPC error codes
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

_KIND_CODES: Dict[ErrorKind, int] = {
    ErrorKind.UNAUTHENTICATED: INVALID_REQUEST,
    ErrorKind.FORBIDDEN: INVALID_REQUEST,
    ErrorKind.CLIENT_ERROR: INVALID_REQUEST,
    ErrorKind.VALIDATION_ERROR: INVALID_PARAMS,
    ErrorKind.UNKNOWN_OPERATION: METHOD_NOT_FOUND,
    ErrorKind.SERVER_ERROR: INTERNAL_ERROR,
    ErrorKind.NETWORK_ERROR: INTERNAL_ERROR,
    ErrorKind.UNEXPECTED: INTERNAL_ERROR,
}


class ClassifiedFailure(Exception):
    """A failure normalized into the server's error taxonomy.

    Attributes:
        kind: Which class of failure occurred
        message: Human-readable description for the MCP client
        details: Optional JSON-serializable payload (GraphQL errors,
                 validation issues, or a summary of the underlying cause)
    """

    def __init__(self, kind: ErrorKind, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details

    @property
    def code(self) -> int:
        """JSON-RPC error code for this failure's kind."""
        return _KIND_CODES[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-RPC error format."""
        data: Dict[str, Any] = {"kind": self.kind.value}
        if self.details is not None:
            data["details"] = self.details
        return {
            "code": self.code,
            "message": self.message,
            "data": data,
        }

    def __repr__(self) -> str:
        return f"ClassifiedFailure(kind={self.kind.value!r}, message={self.message!r})"


def describe_cause(exc: BaseException) -> Dict[str, str]:
    """Summarize an exception for inclusion in failure details."""
    return {"cause": f"{type(exc).__name__}: {exc}"}


def unexpected(message: str, exc: Optional[BaseException] = None) -> ClassifiedFailure:
    """Build an ``UNEXPECTED`` failure, keeping a summary of the cause."""
    details = describe_cause(exc) if exc is not None else None
    return ClassifiedFailure(ErrorKind.UNEXPECTED, message, details=details)
