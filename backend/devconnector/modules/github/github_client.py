"""GitHub REST API client for the profile repository listing."""

import httpx
from typing import Optional, Any

from devconnector.core.config import Settings, settings
from devconnector.core.exceptions import GitHubProfileNotFoundError
from devconnector.core.logging_config import logger


class GitHubClient:
    """Fetch a user's public repositories from GitHub."""

    def __init__(
        self,
        client_id: str = "",
        client_secret: str = "",
        api_url: str = "https://api.github.com",
        per_page: int = 5,
        user_agent: str = "devconnector",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.api_url = api_url.rstrip("/")
        self.per_page = per_page
        self.user_agent = user_agent
        self.transport = transport

    @classmethod
    def from_settings(cls, config: Settings) -> "GitHubClient":
        return cls(
            client_id=config.GITHUB_CLIENT_ID,
            client_secret=config.GITHUB_CLIENT_SECRET,
            api_url=config.GITHUB_API_URL,
            per_page=config.GITHUB_REPOS_PER_PAGE,
            user_agent=config.GITHUB_USER_AGENT,
        )

    @property
    def auth(self) -> Optional[httpx.BasicAuth]:
        """OAuth app credentials raise the anonymous rate limit"""
        if self.client_id and self.client_secret:
            return httpx.BasicAuth(self.client_id, self.client_secret)
        return None

    async def get_user_repos(self, username: str) -> Any:
        """
        Oldest-created-first repositories of ``username``, as GitHub returns them.

        Raises:
            GitHubProfileNotFoundError: GitHub answered with anything but 200
            httpx.HTTPError: network failure
        """
        params = {
            "per_page": self.per_page,
            "sort": "created",
            "direction": "asc",
        }
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github.v3+json",
        }

        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.get(
                f"{self.api_url}/users/{username}/repos",
                params=params,
                headers=headers,
                auth=self.auth,
            )

        if response.status_code != 200:
            logger.warning(f"[GitHub] repos lookup for {username} returned {response.status_code}")
            raise GitHubProfileNotFoundError(username)

        return response.json()


# Singleton instance
github_client = GitHubClient.from_settings(settings)


def get_github_client() -> GitHubClient:
    """FastAPI dependency - overridable in tests"""
    return github_client
