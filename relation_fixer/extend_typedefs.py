"""Copy properties of parent typedefs to the typedefs which extend them."""

import copy
import logging
from typing import Any

logger = logging.getLogger(__name__)


def extend_typedefs(typedef_doclets: list[dict[str, Any]]) -> int:
    """Append inherited properties to every typedef in place.

    Relies on ``augmentsNested`` computed by ``build_relations``. Properties
    the child already declares (by name) are kept as they are.

    Returns:
        The number of properties added.
    """
    by_longname: dict[str, dict[str, Any]] = {}
    for doclet in typedef_doclets:
        by_longname.setdefault(doclet["longname"], doclet)

    added = 0
    for typedef in typedef_doclets:
        for parent_longname in typedef.get("augmentsNested") or []:
            parent = by_longname.get(parent_longname, {})

            for parent_property in parent.get("properties") or []:
                if typedef.get("properties") is None:
                    typedef["properties"] = []
                properties = typedef["properties"]

                name = parent_property.get("name")
                if any(p.get("name") == name for p in properties):
                    continue

                inherited_property = copy.deepcopy(parent_property)
                inherited_property["inherited"] = True
                properties.append(inherited_property)
                added += 1

    logger.debug("Added %s inherited typedef properties", added)
    return added
