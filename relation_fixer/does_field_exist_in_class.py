"""Lookup of a field along a class's ``augments`` chain.

Public helper for templates and plugins that need to know whether a
``Class#field`` longname resolves on the class or one of its parents.
"""

from typing import Any


def does_field_exist_in_class(
    doclets: list[dict[str, Any]], field_longname: str
) -> bool:
    """Check whether ``Class#field`` is declared by the class or a parent class.

    Only the first ``augments`` entry of every class is followed.
    """
    class_name, _, field_name = field_longname.partition("#")
    by_longname: dict[str, dict[str, Any]] = {}
    for doclet in doclets:
        by_longname.setdefault(doclet.get("longname"), doclet)

    visited: set[str] = set()
    current = by_longname.get(class_name)

    while current is not None and current["longname"] not in visited:
        visited.add(current["longname"])

        if f"{current['longname']}#{field_name}" in by_longname:
            return True

        augments = current.get("augments")
        if not augments:
            return False
        current = by_longname.get(augments[0])

    return False
