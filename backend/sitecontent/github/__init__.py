"""GitHub release service access."""

from sitecontent.github.auth import GitHubCredentials
from sitecontent.github.client import GitHubClient

__all__ = ["GitHubClient", "GitHubCredentials"]
