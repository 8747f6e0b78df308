"""
Site content build — Website locale fetch and write steps.

The website's locale.yml lives outside the release and is always read
from the same URL, regardless of the tag being built.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from sitecontent.pipeline.workspace import write_text
from sitecontent.utils.http import fetch_text
from sitecontent.utils.logging import logger, step_timer

WEBSITE_LOCALE_PATH = Path("website") / "locale.yml"


async def fetch_website_content(
    url: str,
    timeout: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    logger.info("Fetching locale.yml from %s", url)
    with step_timer("Fetch website content"):
        return await fetch_text(url, timeout=timeout, transport=transport)


def write_website_content(root: Path, content: str) -> Path:
    filename = root / WEBSITE_LOCALE_PATH
    logger.info("Writing %s", WEBSITE_LOCALE_PATH.as_posix())
    return write_text(filename, content)
