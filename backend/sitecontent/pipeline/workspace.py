"""
Site content build — Workspace reset and file writing.

The content root is wiped at the start of every run, so a crashed run
never leaks stale files into the next one. All stage writers go through
write_text so I/O failures surface as WriteError.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from sitecontent.errors import WriteError
from sitecontent.utils.logging import logger


def reset_workspace(root: Path) -> Path:
    """Delete whatever sits at the content root (tree, file or link), then recreate it."""
    root = Path(root)
    try:
        if root.is_symlink() or root.is_file():
            root.unlink()
            logger.info("  Removed %s", root)
        elif root.exists():
            shutil.rmtree(root)
            logger.info("  Removed %s", root)
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(str(root), str(exc)) from exc
    return root


def safe_join(base: Path, rel_path: str) -> Path:
    """Join a relative path onto base, refusing anything that escapes it."""
    parts = rel_path.replace("\\", "/").split("/")
    if ".." in parts or rel_path.startswith(("/", "\\")):
        raise WriteError(rel_path, "path escapes the output directory")

    resolved = (base / rel_path).resolve()
    if not resolved.is_relative_to(base.resolve()):
        raise WriteError(rel_path, "path escapes the output directory")
    return base / rel_path


def write_text(path: Path, content: str) -> Path:
    """Write content to path, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(str(path), str(exc)) from exc
    return path
