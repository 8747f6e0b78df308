"""
Site content build — API descriptor fetch and write steps.

The release publishes electron-api.json as an asset. It is downloaded
and written through without changes for consumers that expect the
upstream schema.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

from sitecontent.errors import FetchError, NotFoundError
from sitecontent.models.release import AssetModel, ReleaseModel
from sitecontent.pipeline.workspace import write_text
from sitecontent.utils.http import fetch_json
from sitecontent.utils.logging import logger, step_timer

API_ASSET_NAME = "electron-api.json"
API_DATA_PATH = Path("api") / "electron-api.json"


def find_api_asset(release: ReleaseModel) -> AssetModel:
    asset = release.find_asset(API_ASSET_NAME)
    if asset is None:
        logger.error("No %s asset found for %s", API_ASSET_NAME, release.tag_name)
        raise NotFoundError(API_ASSET_NAME, release.tag_name)
    return asset


async def fetch_api_data(
    release: ReleaseModel,
    timeout: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[dict[str, Any]]:
    """Download and decode the release's API descriptor asset."""
    logger.info("Fetching API definitions")
    asset = find_api_asset(release)
    with step_timer("Fetch API data"):
        apis = await fetch_json(asset.browser_download_url, timeout=timeout, transport=transport)
    if not isinstance(apis, list):
        raise FetchError(
            asset.browser_download_url,
            f"expected a JSON array, got {type(apis).__name__}",
        )
    logger.info("  Loaded %d API records", len(apis))
    return apis


def write_api_data(root: Path, apis: list[dict[str, Any]]) -> Path:
    filename = root / API_DATA_PATH
    logger.info("Writing %s (without changes)", API_DATA_PATH.as_posix())
    return write_text(filename, json.dumps(apis, indent=2, ensure_ascii=False))
