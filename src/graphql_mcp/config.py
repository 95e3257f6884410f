"""Configuration for the GraphQL MCP server.

Configuration is read once from the environment at startup, validated, and
handed to the GraphQL client as a frozen value. Nothing reads the environment
after that point.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

ENDPOINT_ENV_VAR = "GRAPHQL_ENDPOINT"
AUTH_TOKEN_ENV_VAR = "AUTH_TOKEN"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigurationError(Exception):
    """Raised when the server configuration is missing or invalid."""

    pass


@dataclass
class ConfigValidationResult:
    """Result of configuration validation with success state and error details.

    Attributes:
        success: True if validation passed, False otherwise
        errors: List of error messages describing validation failures
    """

    success: bool
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Alias for success property for more readable code."""
        return self.success

    def add_error(self, error: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(error)
        self.success = False

    @classmethod
    def success_result(cls) -> ConfigValidationResult:
        """Create a successful validation result."""
        return cls(success=True, errors=[])


@dataclass(frozen=True)
class GraphQLServerConfig:
    """Endpoint and credential for the target GraphQL API.

    Attributes:
        endpoint_url: URL that receives GraphQL POST requests
        auth_token: Optional bearer token; requests go out unauthenticated
                    when it is not set
    """

    endpoint_url: str
    auth_token: Optional[str] = None

    @property
    def has_auth_token(self) -> bool:
        return bool(self.auth_token)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GraphQLServerConfig:
        """Build configuration from environment variables.

        Blank values are treated the same as unset ones.
        """
        env = os.environ if environ is None else environ
        endpoint = (env.get(ENDPOINT_ENV_VAR) or "").strip()
        token = (env.get(AUTH_TOKEN_ENV_VAR) or "").strip()
        return cls(endpoint_url=endpoint, auth_token=token or None)

    def validate(self) -> ConfigValidationResult:
        """Check the endpoint URL; a missing token is not an error."""
        result = ConfigValidationResult.success_result()

        if not self.endpoint_url:
            result.add_error(f"{ENDPOINT_ENV_VAR} is not defined in the environment variables.")
            return result

        parsed = urlparse(self.endpoint_url)
        if parsed.scheme not in ("http", "https"):
            result.add_error(f"{ENDPOINT_ENV_VAR} must be an http or https URL, got: {self.endpoint_url!r}")
        elif not parsed.netloc:
            result.add_error(f"{ENDPOINT_ENV_VAR} is missing a host: {self.endpoint_url!r}")

        return result

    def validate_or_raise(self) -> None:
        """Validate configuration and raise ConfigurationError if invalid."""
        result = self.validate()
        if not result.success:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in result.errors)
            raise ConfigurationError(error_msg)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for diagnostics with the token masked."""
        return {
            "endpoint_url": self.endpoint_url,
            "auth_token": "***" if self.auth_token else None,
        }


def load_config(environ: Optional[Mapping[str, str]] = None) -> GraphQLServerConfig:
    """Load and validate configuration from the environment.

    Raises:
        ConfigurationError: If the endpoint is missing or malformed
    """
    config = GraphQLServerConfig.from_env(environ)
    config.validate_or_raise()

    if not config.has_auth_token:
        logger.warning(
            "%s is not defined in the environment variables. "
            "GraphQL requests may fail if authentication is required.",
            AUTH_TOKEN_ENV_VAR,
        )

    return config


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging to stderr so stdout stays free for the stdio transport."""
    log_level = (level or os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
    )
