"""Configurations describing which inherited members should be synthesized."""

from dataclasses import dataclass
from typing import Any

from relation_fixer.doclet_filter import DocletFilter

NESTED_RELATIONS = ("augmentsNested", "implementsNested", "mixesNested")


@dataclass(frozen=True)
class MissingDocletsSettings:
    """One pass of the missing-doclet synthesizer."""

    relation: str  # augmentsNested/mixesNested/implementsNested
    filter: DocletFilter | None = None
    only_implicitly_inherited: bool = False
    only_explicitly_inherited: bool = False


DEFAULT_SETTINGS: tuple[MissingDocletsSettings, ...] = (
    # Statics inherited from parent classes.
    MissingDocletsSettings("augmentsNested", DocletFilter(scope="static")),
    # Events inherited from parent classes.
    MissingDocletsSettings("augmentsNested", DocletFilter(kind="event")),
    # Everything mixed, except members the child already documents.
    MissingDocletsSettings("mixesNested", only_implicitly_inherited=True),
    # Everything from implemented interfaces.
    MissingDocletsSettings("implementsNested"),
)


def settings_from_config(
    entries: list[dict[str, Any]] | None,
) -> tuple[MissingDocletsSettings, ...]:
    """Build settings from the ``missing_doclets.settings`` config list."""
    if entries is None:
        return DEFAULT_SETTINGS

    settings = []
    for entry in entries:
        relation = entry.get("relation")
        if relation not in NESTED_RELATIONS:
            msg = (
                f"Unknown relation {relation!r}, "
                f"expected one of: {', '.join(NESTED_RELATIONS)}"
            )
            raise ValueError(msg)
        settings.append(
            MissingDocletsSettings(
                relation=relation,
                filter=DocletFilter.from_mapping(entry.get("filter")),
                only_implicitly_inherited=bool(
                    entry.get("only_implicitly_inherited", False)
                ),
                only_explicitly_inherited=bool(
                    entry.get("only_explicitly_inherited", False)
                ),
            )
        )
    return tuple(settings)
