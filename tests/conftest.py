"""Test configuration and fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from gh_issues.github_client.connection import ApiConnection

API_URL = "https://api.github.com"


def user_json(login: str = "octocat", user_id: int = 1) -> dict[str, Any]:
    return {
        "login": login,
        "id": user_id,
        "avatar_url": f"https://avatars.githubusercontent.com/u/{user_id}",
        "url": f"{API_URL}/users/{login}",
        "type": "User",
    }


def milestone_json(number: int = 1, title: str = "v1.0") -> dict[str, Any]:
    return {
        "number": number,
        "title": title,
        "state": "open",
        "description": "First release",
        "creator": user_json(),
        "open_issues": 4,
        "closed_issues": 8,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "closed_at": None,
        "due_on": "2024-03-01T07:00:00Z",
    }


def issue_json(number: int = 1347, title: str = "Found a bug") -> dict[str, Any]:
    return {
        "id": 1,
        "node_id": "MDU6SXNzdWUx",
        "url": f"{API_URL}/repos/octocat/hello-world/issues/{number}",
        "html_url": f"https://github.com/octocat/hello-world/issues/{number}",
        "number": number,
        "state": "open",
        "title": title,
        "body": "I'm having a problem with this.",
        "user": user_json(),
        "labels": [{"id": 208045946, "name": "bug", "color": "f29513"}],
        "assignee": user_json("hubot", 2),
        "assignees": [user_json("hubot", 2)],
        "milestone": milestone_json(),
        "locked": False,
        "comments": 3,
        "closed_at": None,
        "created_at": "2024-01-10T12:00:00Z",
        "updated_at": "2024-01-11T12:00:00Z",
    }


@pytest.fixture
def mock_connection() -> MagicMock:
    """ApiConnection double; its coroutine methods are AsyncMocks."""
    return MagicMock(spec=ApiConnection)


@pytest.fixture
def make_connection() -> Callable[..., ApiConnection]:
    """Build an ApiConnection whose requests are answered by ``handler``."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        token: str | None = "test_token",
    ) -> ApiConnection:
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url=API_URL
        )
        return ApiConnection(token=token, http_client=http_client)

    return _make


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return user_json()


@pytest.fixture
def milestone_payload() -> dict[str, Any]:
    return milestone_json()


@pytest.fixture
def issue_payload() -> dict[str, Any]:
    """A GitHub REST API issue body, including fields the models ignore."""
    return issue_json()
