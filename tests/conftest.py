"""Shared fixtures: a Platform whose HTTP client is a mock."""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests

from ringcentral_api_client import Platform

API_ENDPOINT = "https://platform.example.com"


def make_http_response(
    status_code: int = 200,
    body: Any = "",
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    if not isinstance(body, str):
        body = json.dumps(body)
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


def token_payload(access_token: str = "access-1", refresh_token: str = "refresh-1",
                  expires_in: int = 3600, refresh_token_expires_in: int = 36000) -> Dict[str, Any]:
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "refresh_token": refresh_token,
        "expires_in": expires_in,
        "refresh_token_expires_in": refresh_token_expires_in,
    }


@pytest.fixture
def http_client() -> requests.Session:
    session = requests.Session()
    session.request = MagicMock(return_value=make_http_response(200, "{}"))
    return session


@pytest.fixture
def platform(http_client: requests.Session) -> Platform:
    return Platform(
        app_key="key",
        app_secret="secret",
        api_endpoint=API_ENDPOINT,
        client=http_client,
    )


@pytest.fixture
def logged_in(platform: Platform) -> Platform:
    """A platform holding live tokens, set without any HTTP call."""
    now = time.time()
    platform.auth.access_token = "live-access"
    platform.auth.refresh_token = "live-refresh"
    platform.auth.access_token_expires_at = now + 3600
    platform.auth.refresh_token_expires_at = now + 36000
    return platform
