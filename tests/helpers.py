"""Helper utilities for tests."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any, Optional

import requests

TEST_ENDPOINT = "https://api.example.com/graphql"
TEST_TOKEN = "token-123"


def make_response(status_code: int, body: Any = None, text: Optional[str] = None) -> requests.Response:
    """Build a real ``requests.Response`` carrying a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = HTTPStatus(status_code).phrase
    response.url = TEST_ENDPOINT
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response
