"""Logic for computing nested relation arrays and descendants of doclets.

If ``ClassB`` extends ``ClassA`` and ``ClassA`` implements ``InterfaceC``, both
classes get ``implementsNested: ["InterfaceC"]`` and ``InterfaceC`` gets
``descendants: ["ClassA", "ClassB"]``.
"""

import copy
import logging
from collections.abc import Iterable
from typing import Any

from relation_fixer.doclet_collection import DocletCollection
from relation_fixer.is_relation_subject_kind import SUBJECT_KINDS
from relation_fixer.relation_cycle_error import RelationCycleError

logger = logging.getLogger(__name__)

# Direct relation -> nested (transitive) relation.
RELATIONS = {
    "augments": "augmentsNested",
    "implements": "implementsNested",
    "mixes": "mixesNested",
}


def build_relations(
    doclets: list[dict[str, Any]],
    subject_kinds: Iterable[str] = SUBJECT_KINDS,
) -> list[dict[str, Any]]:
    """Return deep copies of ``doclets`` annotated with relation arrays.

    Every doclet whose kind is in ``subject_kinds`` gets ``augmentsNested``,
    ``implementsNested``, ``mixesNested`` and ``descendants``.

    Raises:
        RelationCycleError: if a doclet is its own ancestor.
    """
    kinds = set(subject_kinds)
    collection = DocletCollection()
    for doclet in copy.deepcopy(doclets):
        collection.add(doclet["longname"], doclet)

    subjects = [d for d in collection.get_all() if d.get("kind") in kinds]
    cache: dict[int, dict[str, list[str]]] = {}

    for doclet in subjects:
        related = _get_ancestors(collection, doclet, (), cache)
        for nested, longnames in related.items():
            doclet[nested] = _unique(longnames)

    for doclet in subjects:
        doclet["descendants"] = _get_descendants(subjects, doclet)

    logger.debug("Built relation arrays for %s doclets", len(subjects))
    return collection.get_all()


def _get_ancestors(
    collection: DocletCollection,
    doclet: dict[str, Any],
    path: tuple[str, ...],
    cache: dict[int, dict[str, list[str]]],
) -> dict[str, list[str]]:
    """Collect longnames of everything ``doclet`` extends, implements or mixes."""
    cached = cache.get(id(doclet))
    if cached is not None:
        return cached

    longname = doclet.get("longname")
    if longname in path:
        raise RelationCycleError([*path[path.index(longname) :], longname])
    path = (*path, longname)

    result: dict[str, list[str]] = {nested: [] for nested in RELATIONS.values()}

    for relation, nested in RELATIONS.items():
        targets = doclet.get(relation) or []
        result[nested].extend(targets)

        for target in targets:
            ancestors = collection.get(target)
            if not ancestors:
                logger.debug("%s: unknown %s target %s", longname, relation, target)

            for ancestor in ancestors:
                ancestor_result = _get_ancestors(collection, ancestor, path, cache)

                for key, values in ancestor_result.items():
                    # Only doclets of the same kind form an inheritance tree.
                    same_kind = ancestor.get("kind") == doclet.get("kind")
                    if key == "augmentsNested" and not same_kind:
                        continue
                    result[key].extend(values)

    result = {key: _unique(values) for key, values in result.items()}
    cache[id(doclet)] = result
    return result


def _get_descendants(
    subjects: list[dict[str, Any]], doclet: dict[str, Any]
) -> list[str]:
    """Return longnames of subjects which extend, implement or mix ``doclet``."""
    longname = doclet.get("longname")
    descendants = [
        d["longname"]
        for d in subjects
        if any(longname in (d.get(nested) or []) for nested in RELATIONS.values())
    ]
    return _unique(descendants)


def _unique(longnames: list[str]) -> list[str]:
    """Drop duplicates, keeping the first occurrence."""
    return list(dict.fromkeys(longnames))
