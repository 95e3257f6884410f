"""HTTP clients for the target GraphQL API."""

from .graphql import DEFAULT_TIMEOUT, GraphQLClient, classify_http_error, classify_request_exception

__all__ = ["DEFAULT_TIMEOUT", "GraphQLClient", "classify_http_error", "classify_request_exception"]
