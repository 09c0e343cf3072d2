"""Typed filter narrowing candidate member doclets."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class DocletFilter:
    """Exact-match criteria; fields left as ``None`` match anything."""

    scope: str | None = None  # static/instance/inner
    kind: str | None = None  # function/member/event/etc.

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "DocletFilter | None":
        """Build a filter from a config mapping such as ``{"scope": "static"}``."""
        if not data:
            return None
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unsupported doclet filter field(s): {', '.join(unknown)}"
            raise ValueError(msg)
        return cls(**data)

    def matches(self, doclet: dict[str, Any]) -> bool:
        """Check whether every set field equals the doclet's value."""
        if self.scope is not None and doclet.get("scope") != self.scope:
            return False
        return self.kind is None or doclet.get("kind") == self.kind
