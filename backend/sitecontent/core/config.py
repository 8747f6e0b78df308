"""
Site content build — Configuration
Loads .env automatically, then reads all settings from environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from sitecontent.errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

_env_path = PROJECT_ROOT / ".env"
load_dotenv(_env_path)

DEFAULT_WEBSITE_LOCALE_URL = (
    "https://cdn.rawgit.com/electron/electron.atom.io/gh-pages/_data/locale.yml"
)


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub release service location and credentials."""
    api_url: str
    token: str
    owner: str
    repo: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level build configuration."""
    github: GitHubConfig
    release_tag: str | None
    content_root: Path
    website_locale_url: str
    http_timeout: float


def load_config() -> AppConfig:
    return AppConfig(
        github=GitHubConfig(
            api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            token=os.getenv("GITHUB_TOKEN", ""),
            owner=os.getenv("RELEASE_OWNER", "electron"),
            repo=os.getenv("RELEASE_REPO", "electron"),
        ),
        release_tag=os.getenv("RELEASE_TAG") or None,
        content_root=Path(
            os.getenv("CONTENT_ROOT", str(PROJECT_ROOT / "content" / "en"))
        ),
        website_locale_url=os.getenv("WEBSITE_LOCALE_URL", DEFAULT_WEBSITE_LOCALE_URL),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "60.0")),
    )


def validate_config(cfg: AppConfig) -> None:
    """Fail fast if the GitHub token is missing."""
    missing: list[str] = []
    if not cfg.github.token:
        missing.append("GITHUB_TOKEN")
    if missing:
        raise ConfigError(missing)
