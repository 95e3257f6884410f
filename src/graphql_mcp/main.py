#!/usr/bin/env python3
"""Entry point for the GraphQL MCP server."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .adapters.mcp_bridge import MCPBridge
from .clients.graphql import GraphQLClient
from .config import ConfigurationError, GraphQLServerConfig, configure_logging, load_config
from .core.tool_registry import create_tool_registry

logger = logging.getLogger(__name__)


def build_bridge(config: GraphQLServerConfig) -> MCPBridge:
    """Wire client, tool registry and MCP bridge for one configuration."""
    client = GraphQLClient(config)
    return MCPBridge(create_tool_registry(client))


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="GraphQL MCP Server - schema introspection and operation execution via Model Context Protocol",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to a .env file to load before reading configuration (default: .env)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, overrides the LOG_LEVEL environment variable",
    )
    args = parser.parse_args(argv)

    # Shell environment wins over values from the .env file
    load_dotenv(args.env_file)
    configure_logging(args.log_level)

    try:
        config = load_config()
    except ConfigurationError as exc:
        logger.critical("FATAL ERROR: %s", exc)
        sys.exit(1)

    logger.info("Connecting to GraphQL Endpoint: %s", config.endpoint_url)
    bridge = build_bridge(config)

    try:
        asyncio.run(bridge.run())
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as exc:
        logger.critical("Fatal error during server execution: %s", exc, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
