"""
Site content build — Build result and pipeline output contracts.

Every run returns a BuildResult: the release used, the files written,
and how long each step took.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class BuildState(str, enum.Enum):
    RECEIVED = "RECEIVED"
    WORKSPACE_RESET = "WORKSPACE_RESET"
    RELEASE_RESOLVED = "RELEASE_RESOLVED"
    DOCS_WRITTEN = "DOCS_WRITTEN"
    API_DATA_WRITTEN = "API_DATA_WRITTEN"
    DESCRIPTIONS_WRITTEN = "DESCRIPTIONS_WRITTEN"
    WEBSITE_WRITTEN = "WEBSITE_WRITTEN"
    DELIVERED = "DELIVERED"
    FAILED = "FAILED"


class StepTiming(BaseModel):
    step: str
    duration_ms: int
    status: str = "ok"  # ok | failed
    detail: str = ""


class BuildResult(BaseModel):
    """Complete output contract for one content build."""

    build_id: str
    release_tag: str
    content_root: str
    files_written: list[str] = Field(default_factory=list)  # relative to content_root
    timings: list[StepTiming] = Field(default_factory=list)
