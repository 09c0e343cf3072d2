"""Multi-valued index of doclets keyed by arbitrary strings."""

from typing import Any


class DocletCollection:
    """Groups doclets under string keys while remembering insertion order."""

    def __init__(self) -> None:
        """Initialize an empty collection."""
        self._data: dict[str, list[dict[str, Any]]] = {}
        self._all_doclets: list[dict[str, Any]] = []
        self._seen: set[int] = set()  # id() of doclets in _all_doclets

    def add(self, key: str, doclet: dict[str, Any]) -> None:
        """Append a doclet to the bucket stored under ``key``."""
        self._data.setdefault(key, []).append(doclet)

        if id(doclet) not in self._seen:
            self._seen.add(id(doclet))
            self._all_doclets.append(doclet)

    def get(self, key: str) -> list[dict[str, Any]]:
        """Return doclets stored under ``key`` or an empty list."""
        return list(self._data.get(key, []))

    def get_all(self) -> list[dict[str, Any]]:
        """Return every added doclet once, in insertion order."""
        return list(self._all_doclets)
