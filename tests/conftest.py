"""Test configuration for pytest."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from graphql_mcp.clients.graphql import GraphQLClient
from graphql_mcp.config import GraphQLServerConfig
from tests.helpers import TEST_ENDPOINT, TEST_TOKEN


@pytest.fixture
def config() -> GraphQLServerConfig:
    return GraphQLServerConfig(endpoint_url=TEST_ENDPOINT, auth_token=TEST_TOKEN)


@pytest.fixture
def session() -> Mock:
    """A ``requests.Session`` stand-in; set ``session.post`` per test."""
    return Mock(spec=requests.Session)


@pytest.fixture
def client(config: GraphQLServerConfig, session: Mock) -> GraphQLClient:
    return GraphQLClient(config, session=session)
