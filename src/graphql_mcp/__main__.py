#!/usr/bin/env python3
"""Run the GraphQL MCP server over stdio.

Environment variables control behavior:

- GRAPHQL_ENDPOINT: URL of the target GraphQL API (required)
- AUTH_TOKEN: Bearer token sent with every request (optional)
- LOG_LEVEL: Logging level (default: 'INFO')

Usage:
    GRAPHQL_ENDPOINT=https://api.example.com/graphql python -m graphql_mcp
"""

from .main import main

if __name__ == "__main__":
    main()
