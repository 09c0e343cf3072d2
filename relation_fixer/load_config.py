"""Logic for loading and merging relation fixer configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from relation_fixer.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "relations": {
        "subject_kinds": ["class", "interface", "mixin", "typedef"],
    },
    "missing_doclets": {
        # None means the built-in statics/events/mixins/interfaces passes.
        "settings": None,
    },
    "typedefs": {
        "extend_properties": True,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
