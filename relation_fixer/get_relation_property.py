"""Choose the marker (``inherited``/``mixed``) stamped on a synthesized doclet."""

from typing import Any

from relation_fixer.doclet_collection import DocletCollection


def get_relation_property(
    collection: DocletCollection,
    child_doclet: dict[str, Any],
    member_doclet: dict[str, Any],
    relation: str,
) -> str | None:
    """Return the marker for ``member_doclet`` copied onto ``child_doclet``.

    Members coming through ``augmentsNested`` are ``inherited`` and members
    coming through ``mixesNested`` are ``mixed``. For interface members the
    owner's descendants decide: if the child reaches the owner through a mixin
    the member is ``mixed``, through a class it is ``inherited``.
    """
    if relation == "augmentsNested":
        return "inherited"
    if relation == "mixesNested":
        return "mixed"

    owner = _find_by_longname(collection, member_doclet.get("memberof"))
    if owner is None:
        return None

    child_longname = child_doclet["longname"]
    is_inherited = False
    is_mixed = False

    for longname in owner.get("descendants") or []:
        descendant = _find_by_longname(collection, longname)
        if descendant is None:
            continue
        if child_longname not in (descendant.get("descendants") or []):
            continue
        if descendant.get("kind") == "mixin":
            is_mixed = True
        elif descendant.get("kind") == "class":
            is_inherited = True

    if is_mixed:
        return "mixed"
    if is_inherited:
        return "inherited"
    return None


def _find_by_longname(
    collection: DocletCollection, longname: str | None
) -> dict[str, Any] | None:
    """Return the first doclet indexed under ``longname:<longname>``."""
    if longname is None:
        return None
    found = collection.get(f"longname:{longname}")
    return found[0] if found else None
