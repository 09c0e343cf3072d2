"""Add doclets of members coming from extended classes, mixins and interfaces.

JSDoc does not inherit static members, events or members of implemented
interfaces on its own. The input has to be processed by ``build_relations``
first.
"""

import copy
import logging
from collections.abc import Sequence
from typing import Any

from relation_fixer.doclet_collection import DocletCollection
from relation_fixer.extend_typedefs import extend_typedefs
from relation_fixer.get_missing_doclets_data import get_missing_doclets_data
from relation_fixer.is_relation_subject_kind import is_member_owner_kind
from relation_fixer.missing_doclets_settings import (
    DEFAULT_SETTINGS,
    MissingDocletsSettings,
)
from relation_fixer.relation_report import RelationReport

logger = logging.getLogger(__name__)


def add_missing_doclets(
    doclets: list[dict[str, Any]],
    settings: Sequence[MissingDocletsSettings] = DEFAULT_SETTINGS,
    *,
    extend_typedef_properties: bool = True,
    report: RelationReport | None = None,
) -> list[dict[str, Any]]:
    """Return a copy of ``doclets`` with the missing member doclets appended.

    Existing doclets superseded by a synthesized one get ``ignore = True``.
    """
    cloned = copy.deepcopy(doclets)
    collection = DocletCollection()
    typedefs = []

    for doclet in cloned:
        collection.add(f"longname:{doclet.get('longname')}", doclet)
        if doclet.get("memberof") is not None:
            collection.add(f"memberof:{doclet['memberof']}", doclet)
        if doclet.get("kind") == "typedef":
            typedefs.append(doclet)

    new_doclets: list[dict[str, Any]] = []
    doclets_to_ignore: list[dict[str, Any]] = []
    synthesized: set[str] = set()

    for child in (d for d in cloned if is_member_owner_kind(d.get("kind"))):
        for setting in settings:
            data = get_missing_doclets_data(collection, child, setting)

            added = []
            for new_doclet in data.new_doclets:
                if new_doclet["longname"] in synthesized:
                    logger.debug("Skipping duplicate %s", new_doclet["longname"])
                    continue
                synthesized.add(new_doclet["longname"])
                added.append(new_doclet)

            new_doclets.extend(added)
            doclets_to_ignore.extend(data.doclets_to_ignore)
            if report is not None:
                report.add_result(setting, added, data.doclets_to_ignore)

    for doclet in doclets_to_ignore:
        doclet["ignore"] = True
    cloned.extend(new_doclets)

    logger.info(
        "Added %s missing doclets, ignored %s overridden doclets",
        len(new_doclets),
        len({id(d) for d in doclets_to_ignore}),
    )

    if extend_typedef_properties:
        inherited = extend_typedefs(typedefs)
        if report is not None:
            report.inherited_properties += inherited

    return cloned
