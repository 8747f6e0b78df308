"""
Site content build — Build Orchestrator.

Runs the content build as a linear state machine:

  RECEIVED → WORKSPACE_RESET → RELEASE_RESOLVED → DOCS_WRITTEN
  → API_DATA_WRITTEN → DESCRIPTIONS_WRITTEN → WEBSITE_WRITTEN → DELIVERED

Each step's return value is passed to the next step as an argument.
Each step is timed, logged, and recorded in the BuildResult. The first
failure marks the build FAILED and propagates; nothing is retried.
"""

from __future__ import annotations

import time
import uuid
from pathlib import Path
from typing import Any

import httpx

from sitecontent.core.config import AppConfig
from sitecontent.github.auth import GitHubCredentials
from sitecontent.github.client import GitHubClient
from sitecontent.models.job import BuildResult, BuildState, StepTiming
from sitecontent.models.release import DocumentModel, ReleaseModel
from sitecontent.pipeline.api_data import fetch_api_data, write_api_data
from sitecontent.pipeline.descriptions import write_api_descriptions
from sitecontent.pipeline.docs import fetch_docs, write_docs
from sitecontent.pipeline.release import resolve_release
from sitecontent.pipeline.website import fetch_website_content, write_website_content
from sitecontent.pipeline.workspace import reset_workspace
from sitecontent.utils.logging import logger


class BuildOrchestrator:
    """
    Sequential orchestrator for the content build.

    The tag argument overrides settings.release_tag; with neither set the
    latest release is used.
    """

    def __init__(
        self,
        settings: AppConfig,
        tag: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.build_id = uuid.uuid4().hex[:12]
        self.settings = settings
        self.tag = tag or settings.release_tag
        self.root = Path(settings.content_root)
        self.transport = transport
        self.state = BuildState.RECEIVED
        self.timings: list[StepTiming] = []
        self.files_written: list[Path] = []
        self.github = GitHubClient(
            credentials=GitHubCredentials(token=settings.github.token),
            owner=settings.github.owner,
            repo=settings.github.repo,
            base_url=settings.github.api_url,
            timeout=settings.http_timeout,
            transport=transport,
        )

    def _record_step(self, name: str, start: float, status: str = "ok", detail: str = ""):
        ms = int((time.perf_counter() - start) * 1000)
        self.timings.append(StepTiming(step=name, duration_ms=ms, status=status, detail=detail))
        symbol = "✓" if status == "ok" else "✗"
        logger.info("  %s %s — %dms %s", symbol, name, ms, detail)

    async def run(self) -> BuildResult:
        """Execute the full build. Returns a complete BuildResult."""
        logger.info("=" * 60)
        logger.info("[%s] Build starting (root=%s)", self.build_id, self.root)
        logger.info("=" * 60)
        build_start = time.perf_counter()

        try:
            self._step_reset()
            release = await self._step_resolve_release()
            docs = await self._step_fetch_docs(release)
            self._step_write_docs(docs)
            apis = await self._step_fetch_api_data(release)
            self._step_write_api_data(apis)
            self._step_write_descriptions(apis)
            content = await self._step_fetch_website()
            self._step_write_website(content)
            self.state = BuildState.DELIVERED
        except Exception:
            self.state = BuildState.FAILED
            raise

        total_ms = int((time.perf_counter() - build_start) * 1000)
        logger.info("=" * 60)
        logger.info(
            "[%s] Build complete — %s, %d files, %dms",
            self.build_id, release.tag_name, len(self.files_written), total_ms,
        )
        logger.info("=" * 60)

        return BuildResult(
            build_id=self.build_id,
            release_tag=release.tag_name,
            content_root=str(self.root),
            files_written=[p.relative_to(self.root).as_posix() for p in self.files_written],
            timings=self.timings,
        )

    def _step_reset(self):
        t = time.perf_counter()
        try:
            reset_workspace(self.root)
        except Exception as exc:
            self._record_step("reset_workspace", t, "failed", str(exc))
            raise
        self.state = BuildState.WORKSPACE_RESET
        self._record_step("reset_workspace", t)

    async def _step_resolve_release(self) -> ReleaseModel:
        t = time.perf_counter()
        try:
            release = await resolve_release(self.github, self.tag)
        except Exception as exc:
            self._record_step("resolve_release", t, "failed", str(exc))
            raise
        self.state = BuildState.RELEASE_RESOLVED
        self._record_step("resolve_release", t, detail=release.tag_name)
        return release

    async def _step_fetch_docs(self, release: ReleaseModel) -> list[DocumentModel]:
        t = time.perf_counter()
        try:
            docs = await fetch_docs(self.github, release.tag_name)
        except Exception as exc:
            self._record_step("fetch_docs", t, "failed", str(exc))
            raise
        self._record_step("fetch_docs", t, detail=f"{len(docs)} docs")
        return docs

    def _step_write_docs(self, docs: list[DocumentModel]):
        t = time.perf_counter()
        try:
            self.files_written.extend(write_docs(self.root, docs))
        except Exception as exc:
            self._record_step("write_docs", t, "failed", str(exc))
            raise
        self.state = BuildState.DOCS_WRITTEN
        self._record_step("write_docs", t)

    async def _step_fetch_api_data(self, release: ReleaseModel) -> list[dict[str, Any]]:
        t = time.perf_counter()
        try:
            apis = await fetch_api_data(
                release, timeout=self.settings.http_timeout, transport=self.transport,
            )
        except Exception as exc:
            self._record_step("fetch_api_data", t, "failed", str(exc))
            raise
        self._record_step("fetch_api_data", t, detail=f"{len(apis)} records")
        return apis

    def _step_write_api_data(self, apis: list[dict[str, Any]]):
        t = time.perf_counter()
        try:
            self.files_written.append(write_api_data(self.root, apis))
        except Exception as exc:
            self._record_step("write_api_data", t, "failed", str(exc))
            raise
        self.state = BuildState.API_DATA_WRITTEN
        self._record_step("write_api_data", t)

    def _step_write_descriptions(self, apis: list[dict[str, Any]]):
        t = time.perf_counter()
        try:
            self.files_written.append(write_api_descriptions(self.root, apis))
        except Exception as exc:
            self._record_step("write_api_descriptions", t, "failed", str(exc))
            raise
        self.state = BuildState.DESCRIPTIONS_WRITTEN
        self._record_step("write_api_descriptions", t)

    async def _step_fetch_website(self) -> str:
        t = time.perf_counter()
        try:
            content = await fetch_website_content(
                self.settings.website_locale_url,
                timeout=self.settings.http_timeout,
                transport=self.transport,
            )
        except Exception as exc:
            self._record_step("fetch_website_content", t, "failed", str(exc))
            raise
        self._record_step("fetch_website_content", t, detail=f"{len(content)} chars")
        return content

    def _step_write_website(self, content: str):
        t = time.perf_counter()
        try:
            self.files_written.append(write_website_content(self.root, content))
        except Exception as exc:
            self._record_step("write_website_content", t, "failed", str(exc))
            raise
        self.state = BuildState.WEBSITE_WRITTEN
        self._record_step("write_website_content", t)


async def run_build(settings: AppConfig, tag: str | None = None) -> BuildResult:
    """Convenience wrapper used by the command-line entry point."""
    return await BuildOrchestrator(settings=settings, tag=tag).run()
