"""
Site content build — GitHub authentication helpers.

The release service authenticates via a personal access token sent
in the Authorization header on every request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitHubCredentials:
    token: str

    def as_headers(self) -> dict[str, str]:
        """Return the auth headers required by the GitHub REST API."""
        return {
            "Authorization": f"token {self.token}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "sitecontent-build",
        }
