"""Find members a doclet should get from the entities it extends, mixes or implements."""

import copy
from dataclasses import dataclass, field
from typing import Any

from relation_fixer.doclet_collection import DocletCollection
from relation_fixer.get_longname_for_new_doclet import get_longname_for_new_doclet
from relation_fixer.get_relation_property import get_relation_property
from relation_fixer.missing_doclets_settings import MissingDocletsSettings


@dataclass
class MissingDocletsData:
    """Synthesized doclets and existing doclets superseded by them."""

    new_doclets: list[dict[str, Any]] = field(default_factory=list)
    doclets_to_ignore: list[dict[str, Any]] = field(default_factory=list)


def get_missing_doclets_data(
    collection: DocletCollection,
    child_doclet: dict[str, Any],
    settings: MissingDocletsSettings,
) -> MissingDocletsData:
    """Synthesize members missing on ``child_doclet`` for one relation.

    ``collection`` must index doclets under ``memberof:<longname>`` and
    ``longname:<longname>`` keys, and the doclets must already carry the
    nested relation arrays computed by ``build_relations``.
    """
    data = MissingDocletsData()

    for member in _get_doclets_to_add(collection, child_doclet, settings):
        new_doclet = copy.deepcopy(member)
        new_doclet["longname"] = get_longname_for_new_doclet(member, child_doclet)
        new_doclet["memberof"] = child_doclet["longname"]

        relation_property = get_relation_property(
            collection, child_doclet, member, settings.relation
        )
        if relation_property:
            new_doclet[relation_property] = True

        same_member = [
            d
            for d in collection.get(f"memberof:{new_doclet['memberof']}")
            if d.get("name") == new_doclet.get("name")
            and d.get("kind") == new_doclet.get("kind")
        ]

        if not same_member:
            if not settings.only_explicitly_inherited:
                data.new_doclets.append(new_doclet)
        elif (
            _explicitly_inherits(same_member)
            and not settings.only_implicitly_inherited
        ):
            # The child used @inheritdoc or @override, so the copy replaces it.
            data.doclets_to_ignore.extend(same_member)
            data.new_doclets.append(new_doclet)

    return data


def _get_doclets_to_add(
    collection: DocletCollection,
    child_doclet: dict[str, Any],
    settings: MissingDocletsSettings,
) -> list[dict[str, Any]]:
    """Return documented members of the child's ancestors matching the filter."""
    candidates: list[dict[str, Any]] = []
    for longname in child_doclet.get(settings.relation) or []:
        for member in collection.get(f"memberof:{longname}"):
            if _is_unwanted(member):
                continue
            if settings.filter is not None and not settings.filter.matches(member):
                continue
            candidates.append(member)
    return candidates


def _is_unwanted(doclet: dict[str, Any]) -> bool:
    """Skip ignored, undocumented and already inheriting doclets."""
    return (
        doclet.get("ignore") is True
        or doclet.get("undocumented") is True
        or "inheritdoc" in doclet
    )


def _explicitly_inherits(doclets: list[dict[str, Any]]) -> bool:
    return any("inheritdoc" in d or "override" in d for d in doclets)
