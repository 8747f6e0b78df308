"""
Site content build — API description extraction.

The flat API payload is first re-keyed by name into a tree:

  [{"name": "App", "methods": [{"name": "quit", ...}]}]
  → {"App": {"name": "App", "methods": {"quit": {"name": "quit", ...}}}}

then every "description" string is collected under the dotted path of the
object that owns it ("App", "App.methods.quit"). Translators work from the
resulting flat YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from sitecontent.pipeline.workspace import write_text
from sitecontent.utils.logging import logger

DESCRIPTIONS_PATH = Path("api") / "api-descriptions.yml"
KEY_FIELD = "name"
DESCRIPTION_FIELD = "description"
SEPARATOR = "."


def _is_keyable(items: list[Any]) -> bool:
    return bool(items) and all(
        isinstance(item, dict) and isinstance(item.get(KEY_FIELD), str) for item in items
    )


def _is_named_entry(value: Any, key: str) -> bool:
    """True for an objectified item stored under its own name, e.g. a property called "description"."""
    return isinstance(value, dict) and value.get(KEY_FIELD) == key


def objectify(value: Any) -> Any:
    """Recursively turn lists of named objects into objects keyed by name."""
    if isinstance(value, list):
        if _is_keyable(value):
            return {item[KEY_FIELD]: objectify(item) for item in value}
        return [objectify(item) for item in value]
    if isinstance(value, dict):
        return {key: objectify(child) for key, child in value.items()}
    return value


def shake_descriptions(tree: Any) -> dict[str, str]:
    """
    Collect every non-empty "description" string into one flat mapping.

    Keys are the SEPARATOR-joined path to the owning object. When two paths
    flatten to the same key, the later one wins.
    """
    found: dict[str, str] = {}

    def walk(node: Any, path: list[str]) -> None:
        if isinstance(node, dict):
            for key, child in node.items():
                if key == DESCRIPTION_FIELD and not _is_named_entry(child, key):
                    # non-string descriptions are neither collected nor walked into
                    if isinstance(child, str) and child and path:
                        found[SEPARATOR.join(path)] = child
                    continue
                walk(child, path + [str(key)])
        elif isinstance(node, list):
            for index, child in enumerate(node):
                walk(child, path + [str(index)])

    walk(tree, [])
    return found


def extract_descriptions(apis: list[dict[str, Any]]) -> dict[str, str]:
    return shake_descriptions(objectify(apis))


def write_api_descriptions(root: Path, apis: list[dict[str, Any]]) -> Path:
    descriptions = extract_descriptions(apis)
    filename = root / DESCRIPTIONS_PATH
    logger.info("Writing %s (%d descriptions)", DESCRIPTIONS_PATH.as_posix(), len(descriptions))
    content = yaml.safe_dump(
        descriptions,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=float("inf"),
    )
    return write_text(filename, content)
