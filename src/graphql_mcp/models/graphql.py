"""GraphQL request and response shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, TypedDict, Union


class GraphQLErrorLocation(TypedDict):
    line: int
    column: int


class GraphQLOperationError(TypedDict, total=False):
    message: str
    locations: List[GraphQLErrorLocation]
    path: List[Union[str, int]]
    extensions: Dict[str, Any]


class GraphQLResponseEnvelope(TypedDict, total=False):
    data: Optional[Any]
    errors: List[GraphQLOperationError]


@dataclass(frozen=True)
class GraphQLOperation:
    """A single query or mutation to send to the endpoint."""

    query: str
    variables: Optional[Mapping[str, Any]] = None
    operation_name: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.query:
            raise ValueError("GraphQL operation requires a non-empty query")

    @property
    def display_name(self) -> str:
        return self.operation_name or "unnamed"

    def to_payload(self) -> Dict[str, Any]:
        """JSON request body: ``variables`` and ``operationName`` only when given."""
        payload: Dict[str, Any] = {"query": self.query}
        if self.variables is not None:
            payload["variables"] = dict(self.variables)
        if self.operation_name:
            payload["operationName"] = self.operation_name
        return payload


def error_messages(errors: Any) -> List[str]:
    """Extract the ``message`` of each GraphQL error, tolerating odd shapes."""
    if not isinstance(errors, list):
        return []
    messages = []
    for error in errors:
        if isinstance(error, dict) and error.get("message"):
            messages.append(str(error["message"]))
        else:
            messages.append(str(error))
    return messages
