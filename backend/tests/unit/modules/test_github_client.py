"""
Unit Tests for the GitHub repository lookup
"""
import base64
import httpx
import pytest

from devconnector.core.exceptions import GitHubProfileNotFoundError
from devconnector.modules.github.github_client import GitHubClient

REPOS = [{"id": 1, "name": "hello-world", "html_url": "https://github.com/octocat/hello-world"}]


def make_client(handler, **kwargs) -> GitHubClient:
    return GitHubClient(transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_returns_repos_verbatim():
    client = make_client(lambda request: httpx.Response(200, json=REPOS))

    assert await client.get_user_repos("octocat") == REPOS


@pytest.mark.asyncio
async def test_request_paging_and_ordering():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["headers"] = request.headers
        return httpx.Response(200, json=[])

    client = make_client(handler, per_page=5, user_agent="devconnector-tests")
    await client.get_user_repos("octocat")

    url = seen["url"]
    assert url.path == "/users/octocat/repos"
    assert url.params["per_page"] == "5"
    assert url.params["sort"] == "created"
    assert url.params["direction"] == "asc"
    assert seen["headers"]["user-agent"] == "devconnector-tests"
    assert "authorization" not in seen["headers"]


@pytest.mark.asyncio
async def test_client_credentials_sent():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["authorization"] = request.headers.get("authorization")
        return httpx.Response(200, json=[])

    client = make_client(handler, client_id="id123", client_secret="shh")
    await client.get_user_repos("octocat")

    expected = base64.b64encode(b"id123:shh").decode()
    assert seen["authorization"] == f"Basic {expected}"


@pytest.mark.asyncio
async def test_non_200_is_not_found():
    client = make_client(lambda request: httpx.Response(404, json={"message": "Not Found"}))

    with pytest.raises(GitHubProfileNotFoundError) as exc_info:
        await client.get_user_repos("nobody-here")

    assert exc_info.value.status_code == 404
    assert exc_info.value.to_response() == {"msg": "No Github profile found"}


@pytest.mark.asyncio
async def test_rate_limited_is_not_found():
    client = make_client(lambda request: httpx.Response(403, json={"message": "API rate limit exceeded"}))

    with pytest.raises(GitHubProfileNotFoundError):
        await client.get_user_repos("octocat")
