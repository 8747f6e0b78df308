"""Site content data models — typed contracts for the build pipeline."""

from sitecontent.models.release import (
    AssetModel,
    DocumentModel,
    ReleaseModel,
)
from sitecontent.models.job import (
    BuildResult,
    BuildState,
    StepTiming,
)

__all__ = [
    "AssetModel",
    "DocumentModel",
    "ReleaseModel",
    "BuildResult",
    "BuildState",
    "StepTiming",
]
