"""
Site content build — Documentation fetch and write steps.

Docs come from the release's source archive: every Markdown file under the
top-level docs/ directory, named relative to docs/. API reference pages are
dropped here because the API descriptor stage covers them.
"""

from __future__ import annotations

import io
import tarfile
from pathlib import Path

from sitecontent.errors import FetchError
from sitecontent.github.client import GitHubClient
from sitecontent.models.release import DocumentModel
from sitecontent.pipeline.workspace import safe_join, write_text
from sitecontent.utils.logging import logger, step_timer

DOCS_DIR = "docs"
EXCLUDED_SEGMENT = "api"


def extract_docs(archive: bytes) -> list[DocumentModel]:
    """
    Read every docs/**/*.md file out of a GitHub source tarball.

    GitHub wraps the tree in a single "<owner>-<repo>-<sha>/" directory,
    which is stripped before matching.
    """
    docs: list[DocumentModel] = []
    with tarfile.open(fileobj=io.BytesIO(archive), mode="r:*") as tar:
        for member in tar:
            if not member.isfile():
                continue
            parts = member.name.split("/")
            if len(parts) < 3 or parts[1] != DOCS_DIR:
                continue
            filename = "/".join(parts[2:])
            if not filename.endswith(".md"):
                continue
            handle = tar.extractfile(member)
            if handle is None:
                continue
            docs.append(
                DocumentModel(
                    filename=filename,
                    markdown_content=handle.read().decode("utf-8"),
                )
            )
    return docs


def filter_docs(docs: list[DocumentModel]) -> list[DocumentModel]:
    """Drop docs with an "api" path segment at any depth."""
    return [doc for doc in docs if EXCLUDED_SEGMENT not in doc.segments]


async def fetch_docs(client: GitHubClient, tag: str) -> list[DocumentModel]:
    """Fetch the non-API docs for a release tag. All or nothing."""
    logger.info("Fetching %s docs from %s/%s repo", tag, client.owner, client.repo)
    with step_timer("Fetch docs"):
        try:
            archive = await client.download_tarball(tag)
            docs = extract_docs(archive)
        except FetchError:
            logger.error("Unable to fetch docs for %s", tag)
            raise
        except (tarfile.TarError, EOFError, OSError, UnicodeDecodeError) as exc:
            logger.error("Unable to fetch docs for %s", tag)
            raise FetchError(f"docs for {tag}", f"unreadable archive: {exc}") from exc

        non_api_docs = filter_docs(docs)
        logger.info(
            "  Found %d docs (%d API docs skipped)",
            len(non_api_docs), len(docs) - len(non_api_docs),
        )
        return non_api_docs


def write_docs(root: Path, docs: list[DocumentModel]) -> list[Path]:
    """Write each doc to <root>/docs/<filename>, in list order."""
    logger.info("Writing %d markdown docs", len(docs))
    docs_root = root / DOCS_DIR
    written: list[Path] = []
    for doc in docs:
        filename = write_text(safe_join(docs_root, doc.filename), doc.markdown_content)
        written.append(filename)
        logger.info("   %s", filename.relative_to(root).as_posix())
    return written
