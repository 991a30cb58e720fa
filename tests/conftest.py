"""
Pytest configuration for parse-seed.

Provides fixtures for:
- Settings with test credentials
- Canned random-user API payloads
- `httpx.AsyncClient` instances backed by `httpx.MockTransport`
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from parse_seed.config import Settings, get_settings

TEST_SERVER_URL = "http://parse.test/parse"
TEST_RANDOMUSER_URL = "https://randomuser.test/api/"

SAMPLE_NAMES = [
    ("jane", "O'doe"),
    ("BRUCE", "wayne"),
    ("élodie", "durand"),
    ("jean-LUC", "picard"),
    ("ada", "lovelace"),
]


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        parse_application_id="test-app",
        parse_client_key="test-key",
        parse_server_url=TEST_SERVER_URL,
        randomuser_url=TEST_RANDOMUSER_URL,
        log_level="DEBUG",
    )


def make_user_payload(count: int, legacy: bool = True) -> Dict[str, Any]:
    """
    Build a random-user API body with `count` records.

    `legacy=True` produces the `{"user": {"name": ...}}` shape, otherwise the
    flat `{"name": ...}` shape of the current API.
    """
    results: List[Dict[str, Any]] = []
    for index in range(count):
        first, last = SAMPLE_NAMES[index % len(SAMPLE_NAMES)]
        person = {"name": {"title": "mx", "first": first, "last": last}, "gender": "female"}
        results.append({"user": person} if legacy else person)
    return {"results": results, "info": {"results": count, "version": "0.8"}}


@pytest.fixture
def user_payload() -> Callable[..., Dict[str, Any]]:
    return make_user_payload


def _parse_batch_success(request: httpx.Request) -> httpx.Response:
    """MockTransport handler answering every batch entry with a created object."""
    body = json.loads(request.content)
    return httpx.Response(
        200,
        json=[
            {"success": {"objectId": f"obj{index}", "createdAt": "2026-01-01T00:00:00.000Z"}}
            for index, _ in enumerate(body["requests"])
        ],
    )


@pytest.fixture
def parse_batch_success() -> Callable[[httpx.Request], httpx.Response]:
    return _parse_batch_success


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """
    Factory returning an `httpx.AsyncClient` routed through a handler.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
