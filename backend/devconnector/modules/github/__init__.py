"""GitHub integration module."""

from .github_client import GitHubClient, get_github_client

__all__ = ["GitHubClient", "get_github_client"]
