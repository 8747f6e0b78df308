"""
Site content build — Typed release data model.

Release metadata from GitHub is validated into ReleaseModel once and then
handed from stage to stage. No raw dicts leak across boundaries, except the
API payload, which is written through untouched.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AssetModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    browser_download_url: str = Field(min_length=1)


class ReleaseModel(BaseModel):
    """A published release and its downloadable assets."""

    model_config = ConfigDict(frozen=True)

    tag_name: str = Field(min_length=1)
    name: str | None = None
    assets: list[AssetModel] = Field(default_factory=list)

    def find_asset(self, name: str) -> AssetModel | None:
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None


class DocumentModel(BaseModel):
    filename: str = Field(min_length=1)
    markdown_content: str = ""

    @property
    def segments(self) -> list[str]:
        return self.filename.replace("\\", "/").split("/")
