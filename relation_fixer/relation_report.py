"""Summary of what a relation-fixing run synthesized and suppressed."""

import json
import time
from pathlib import Path
from typing import Any

from relation_fixer.missing_doclets_settings import MissingDocletsSettings


class RelationReport:
    """Collects per-setting counts of synthesized and suppressed doclets."""

    def __init__(self) -> None:
        """Start an empty report."""
        self.start_time = time.time()
        self.results: dict[str, dict[str, int]] = {}
        self.synthesized: list[str] = []
        self.inherited_properties = 0
        self._ignored: dict[int, dict[str, Any]] = {}  # id -> doclet

    def add_result(
        self,
        settings: MissingDocletsSettings,
        new_doclets: list[dict[str, Any]],
        ignored_doclets: list[dict[str, Any]],
    ) -> None:
        """Record the outcome of one setting applied to one doclet."""
        counts = self.results.setdefault(
            describe_settings(settings), {"added": 0, "ignored": 0}
        )
        counts["added"] += len(new_doclets)
        counts["ignored"] += len(ignored_doclets)
        self.synthesized.extend(d["longname"] for d in new_doclets)
        for doclet in ignored_doclets:
            self._ignored.setdefault(id(doclet), doclet)

    @property
    def total_added(self) -> int:
        """Number of doclets synthesized over all settings."""
        return sum(c["added"] for c in self.results.values())

    @property
    def total_ignored(self) -> int:
        """Number of distinct existing doclets marked as ignored."""
        return len(self._ignored)

    def to_dict(self) -> dict[str, Any]:
        """Return the report as JSON-serializable data."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "total_added": self.total_added,
                "total_ignored": self.total_ignored,
                "inherited_properties": self.inherited_properties,
            },
            "settings": self.results,
            "synthesized": self.synthesized,
        }

    def write(self, path: Path) -> None:
        """Write the report as JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")


def describe_settings(settings: MissingDocletsSettings) -> str:
    """Render settings as a short label, e.g. ``augmentsNested[scope=static]``."""
    label = settings.relation
    if settings.filter is not None:
        criteria = [
            f"{name}={value}"
            for name, value in (
                ("scope", settings.filter.scope),
                ("kind", settings.filter.kind),
            )
            if value is not None
        ]
        label += "[" + ",".join(criteria) + "]"
    if settings.only_implicitly_inherited:
        label += " (implicit only)"
    if settings.only_explicitly_inherited:
        label += " (explicit only)"
    return label
