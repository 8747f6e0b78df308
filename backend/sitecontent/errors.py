"""
Site content build — Structured error catalog.

Every error has a code, human message, and suggested fix.
Any of them aborts the build; nothing is retried.
"""

from __future__ import annotations

from typing import Any


class SiteContentError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class ConfigError(SiteContentError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            code="CONFIG_MISSING",
            message=f"Missing required environment variables: {', '.join(missing)}",
            suggestion="Copy .env.example to .env and fill in the values.",
            detail=missing,
        )


class FetchError(SiteContentError):
    def __init__(self, what: str, reason: str = ""):
        self.what = what
        super().__init__(
            code="FETCH_FAILED",
            message=f"Unable to fetch {what}" + (f": {reason}" if reason else ""),
            suggestion="Check network access, the GitHub token, and that the upstream resource exists.",
            detail=reason[:500] if reason else None,
        )


class NotFoundError(SiteContentError):
    def __init__(self, asset_name: str, tag: str):
        self.asset_name = asset_name
        self.tag = tag
        super().__init__(
            code="ASSET_NOT_FOUND",
            message=f"No {asset_name} asset found for {tag}",
            suggestion="Pick a release that publishes the API descriptor asset.",
        )


class WriteError(SiteContentError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        super().__init__(
            code="WRITE_FAILED",
            message=f"Unable to write {path}" + (f": {reason}" if reason else ""),
            suggestion="Check permissions and free space for the content directory.",
        )
