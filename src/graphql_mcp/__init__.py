"""GraphQL MCP Server - a Model Context Protocol bridge to a GraphQL API.

This package exposes two MCP tools, schema introspection and arbitrary
operation execution, and translates each call into a GraphQL request over
HTTP with failures normalized into a single error taxonomy.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ConfigurationError, GraphQLServerConfig, load_config
from .exceptions import ClassifiedFailure, ErrorKind

__all__ = [
    "ClassifiedFailure",
    "ConfigurationError",
    "ErrorKind",
    "GraphQLServerConfig",
    "load_config",
    "__version__",
]
