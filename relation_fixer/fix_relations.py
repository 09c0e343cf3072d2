"""Full relation fixing pipeline over a list of doclets."""

from typing import Any

from relation_fixer.add_missing_doclets import add_missing_doclets
from relation_fixer.build_relations import build_relations
from relation_fixer.load_config import DEFAULT_CONFIG
from relation_fixer.missing_doclets_settings import settings_from_config
from relation_fixer.relation_report import RelationReport


def fix_relations(
    doclets: list[dict[str, Any]],
    config: dict[str, Any] | None = None,
    report: RelationReport | None = None,
) -> list[dict[str, Any]]:
    """Build relation arrays, then add missing doclets. ``doclets`` is not mutated."""
    config = config or DEFAULT_CONFIG
    subject_kinds = config.get("relations", {}).get("subject_kinds")
    settings = settings_from_config(
        config.get("missing_doclets", {}).get("settings")
    )
    extend = config.get("typedefs", {}).get("extend_properties", True)

    with_relations = build_relations(
        doclets, subject_kinds or DEFAULT_CONFIG["relations"]["subject_kinds"]
    )
    return add_missing_doclets(
        with_relations,
        settings,
        extend_typedef_properties=extend,
        report=report,
    )
