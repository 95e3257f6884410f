"""introspectGraphQLSchema tool handler."""

from __future__ import annotations

import logging
from typing import Any, Dict

from graphql import get_introspection_query

from ..clients.graphql import GraphQLClient
from ..exceptions import ClassifiedFailure, ErrorKind, unexpected
from ..models.graphql import GraphQLOperation, error_messages

logger = logging.getLogger(__name__)

INTROSPECTION_QUERY = get_introspection_query()


def handle_introspection(client: GraphQLClient) -> Dict[str, Any]:
    """Fetch the GraphQL schema using the standard introspection query.

    Unlike general execution, any GraphQL-level error fails the call: a
    successful introspection has exactly one shape.

    Returns:
        The response ``data`` object, i.e. ``{"__schema": {...}}``

    Raises:
        ClassifiedFailure: If the request fails, the server reports errors,
            or no ``__schema`` comes back
    """
    try:
        logger.info("Executing GraphQL introspection query...")
        response = client.execute(GraphQLOperation(query=INTROSPECTION_QUERY))

        errors = response.get("errors")
        if errors:
            messages = "; ".join(error_messages(errors)) or str(errors)
            logger.error("GraphQL introspection query returned errors: %s", messages)
            raise ClassifiedFailure(
                ErrorKind.UNEXPECTED,
                f"Introspection query failed: {messages}",
                details={"errors": errors},
            )

        data = response.get("data")
        if not isinstance(data, dict) or data.get("__schema") is None:
            logger.error("Introspection query did not return a valid __schema object: %r", data)
            raise ClassifiedFailure(
                ErrorKind.UNEXPECTED,
                "Introspection query did not return a valid schema.",
            )

        logger.info("GraphQL introspection query successful.")
        return data
    except ClassifiedFailure:
        raise
    except Exception as exc:
        logger.error("Error executing introspection query: %s", exc, exc_info=True)
        raise unexpected("An unexpected error occurred during schema introspection.", exc) from exc
