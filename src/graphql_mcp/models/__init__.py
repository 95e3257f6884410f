"""Data models for GraphQL operations and tool inputs."""

from .graphql import (
    GraphQLOperation,
    GraphQLOperationError,
    GraphQLResponseEnvelope,
    error_messages,
)
from .inputs import ExecuteOperationParams, IntrospectSchemaParams

__all__ = [
    "ExecuteOperationParams",
    "GraphQLOperation",
    "GraphQLOperationError",
    "GraphQLResponseEnvelope",
    "IntrospectSchemaParams",
    "error_messages",
]
