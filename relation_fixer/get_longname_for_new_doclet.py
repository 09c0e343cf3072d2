"""Longname construction for synthesized member doclets."""

from typing import Any


def get_longname_for_new_doclet(
    parent_doclet: dict[str, Any], child_doclet: dict[str, Any]
) -> str:
    """Move the parent's last ``.name`` or ``#name`` segment onto the child.

    ``Parent.create`` copied to ``Child`` gives ``Child.create``;
    ``Parent#render`` gives ``Child#render``.
    """
    longname = parent_doclet["longname"]
    separator_index = max(longname.rfind("."), longname.rfind("#"))
    return child_doclet["longname"] + longname[separator_index:]
