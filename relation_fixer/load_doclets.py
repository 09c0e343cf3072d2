"""Logic for loading doclet dumps produced by ``jsdoc -X``."""

import json
from pathlib import Path
from typing import Any

import yaml


def load_doclets(path: Path) -> list[dict[str, Any]]:
    """Load a JSON (or YAML) array of doclets."""
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yml", ".yaml"}:
        doc = yaml.safe_load(raw)
    else:
        doc = json.loads(raw)

    if not isinstance(doc, list):
        msg = f"Expected a list of doclets in {path}, got {type(doc).__name__}"
        raise ValueError(msg)
    return [d for d in doc if isinstance(d, dict)]
