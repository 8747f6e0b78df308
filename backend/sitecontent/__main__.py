"""
Site content build — command-line entry point.

  python -m sitecontent

Takes no flags. Settings come from the environment (and .env); set
RELEASE_TAG to build a specific release instead of the latest one.
Exits non-zero with a message on stderr when any step fails.
"""

import asyncio
import sys

from sitecontent.core.config import load_config, validate_config
from sitecontent.errors import SiteContentError
from sitecontent.pipeline.orchestrator import run_build
from sitecontent.utils.logging import logger


def main() -> int:
    try:
        settings = load_config()
        validate_config(settings)
        asyncio.run(run_build(settings))
    except SiteContentError as exc:
        logger.error("%s: %s", exc.code, exc.message)
        if exc.suggestion:
            logger.error("  %s", exc.suggestion)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
