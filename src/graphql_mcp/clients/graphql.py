"""HTTP client that executes GraphQL operations against the configured endpoint.

The client sends exactly one POST per operation and never retries. Transport
and HTTP failures are classified here, at the lowest layer that can see the
status code; GraphQL-level ``errors`` inside a 2xx body are left for the
caller to interpret.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .. import __version__
from ..config import GraphQLServerConfig
from ..exceptions import ClassifiedFailure, ErrorKind, describe_cause, unexpected
from ..models.graphql import GraphQLOperation, GraphQLResponseEnvelope, error_messages

logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT = 30


def _request_headers(auth_token: Optional[str]) -> Dict[str, str]:
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": f"graphql-mcp-server/{__version__}",
    }
    if auth_token:
        headers["Authorization"] = f"Bearer {auth_token}"
    return headers


def _response_errors(response: requests.Response) -> Optional[list]:
    """Return the ``errors`` array of an error response body, if it has one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("errors"), list) and body["errors"]:
        return body["errors"]
    return None


def classify_http_error(exc: requests.RequestException) -> ClassifiedFailure:
    """Map an HTTP error response onto the failure taxonomy by status code."""
    response = exc.response
    status_code = response.status_code
    details: Dict[str, Any] = {"status_code": status_code}

    if status_code == 401:
        return ClassifiedFailure(
            ErrorKind.UNAUTHENTICATED,
            "Authentication failed. Check your AUTH_TOKEN.",
            details=details,
        )
    if status_code == 403:
        return ClassifiedFailure(
            ErrorKind.FORBIDDEN,
            "Permission denied for GraphQL operation.",
            details=details,
        )

    message = f"GraphQL request failed: {exc}"
    errors = _response_errors(response)
    if errors:
        details["errors"] = errors
        message = f"{message} - {error_messages(errors)[0]}"

    kind = ErrorKind.CLIENT_ERROR if 400 <= status_code < 500 else ErrorKind.SERVER_ERROR
    return ClassifiedFailure(kind, message, details=details)


def classify_request_exception(exc: requests.RequestException) -> ClassifiedFailure:
    """Classify a ``requests`` failure, with or without an HTTP response."""
    if exc.response is not None and exc.response.status_code >= 400:
        return classify_http_error(exc)
    return ClassifiedFailure(
        ErrorKind.NETWORK_ERROR,
        f"Network error while contacting GraphQL endpoint: {exc}",
        details=describe_cause(exc),
    )


class GraphQLClient:
    """Executes GraphQL operations over HTTP.

    Args:
        config: Validated server configuration
        session: Optional ``requests.Session``; module-level ``requests`` is
                 used when omitted
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        config: GraphQLServerConfig,
        session: Optional[requests.Session] = None,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self._config = config
        self._session = session
        self._timeout = timeout

    @property
    def endpoint_url(self) -> str:
        return self._config.endpoint_url

    def execute(self, operation: GraphQLOperation) -> GraphQLResponseEnvelope:
        """Send one operation and return the decoded response body.

        Returns:
            The JSON body as received, including any GraphQL ``errors``

        Raises:
            ClassifiedFailure: On missing configuration, transport failure,
                HTTP error status, or a body that is not a JSON object
        """
        if not self._config.endpoint_url:
            raise ClassifiedFailure(ErrorKind.UNEXPECTED, "GraphQL endpoint URL is not configured.")

        client = self._session or requests
        try:
            response = client.post(
                self._config.endpoint_url,
                json=operation.to_payload(),
                headers=_request_headers(self._config.auth_token),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("GraphQL request for %s failed: %s", operation.display_name, exc)
            raise classify_request_exception(exc) from exc
        except Exception as exc:
            logger.error("Unexpected error during GraphQL request: %s", exc, exc_info=True)
            raise unexpected(f"An unexpected error occurred: {exc}", exc) from exc

        return self._decode(response)

    def _decode(self, response: requests.Response) -> GraphQLResponseEnvelope:
        try:
            body = response.json()
        except ValueError as exc:
            logger.error("GraphQL endpoint returned non-JSON body (status %s)", response.status_code)
            raise unexpected("GraphQL endpoint returned a response that is not valid JSON.", exc) from exc

        if not isinstance(body, dict):
            logger.error("GraphQL endpoint returned %s instead of an object", type(body).__name__)
            raise ClassifiedFailure(ErrorKind.UNEXPECTED, "GraphQL response was not a JSON object.")

        return body
