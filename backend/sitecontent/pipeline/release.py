"""
Site content build — Release resolution step.
"""

from __future__ import annotations

from sitecontent.errors import FetchError
from sitecontent.github.client import GitHubClient
from sitecontent.models.release import ReleaseModel
from sitecontent.utils.logging import logger, step_timer


async def resolve_release(client: GitHubClient, tag: str | None = None) -> ReleaseModel:
    """Return the release for tag, or the latest published release when tag is empty."""
    name = f"{client.owner}/{client.repo}"
    with step_timer("Resolve release"):
        try:
            if tag:
                logger.info("Fetching %s %s", name, tag)
                release = await client.get_release_by_tag(tag)
            else:
                logger.info("Fetching the latest release of %s", name)
                release = await client.get_latest_release()
        except FetchError:
            logger.error("Unable to fetch %s release %s", name, tag or "latest")
            raise

    logger.info("  Resolved %s (%d assets)", release.tag_name, len(release.assets))
    return release
