"""executeGraphQLOperation tool handler."""

from __future__ import annotations

import logging

from ..clients.graphql import GraphQLClient
from ..exceptions import ClassifiedFailure, unexpected
from ..models.graphql import GraphQLOperation, GraphQLResponseEnvelope, error_messages
from ..models.inputs import ExecuteOperationParams

logger = logging.getLogger(__name__)


def handle_execution(client: GraphQLClient, params: ExecuteOperationParams) -> GraphQLResponseEnvelope:
    """Execute a caller-supplied query or mutation.

    The full envelope is returned even when it carries ``errors``; partial
    data with field errors is a legitimate result and the caller decides what
    to do with it.
    """
    name = params.operation_name or "unnamed"
    try:
        logger.info("Executing GraphQL query: %s...", name)
        response = client.execute(
            GraphQLOperation(
                query=params.query,
                variables=params.variables,
                operation_name=params.operation_name,
            )
        )

        errors = response.get("errors")
        if errors:
            logger.warning("GraphQL query %s returned errors: %s", name, "; ".join(error_messages(errors)))

        logger.info("GraphQL query %s executed.", name)
        return response
    except ClassifiedFailure:
        raise
    except Exception as exc:
        logger.error("Error executing GraphQL query %s: %s", name, exc, exc_info=True)
        raise unexpected(
            f"An unexpected error occurred while executing the GraphQL query '{name}'.",
            exc,
        ) from exc
