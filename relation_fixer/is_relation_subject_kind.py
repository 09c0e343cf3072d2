"""Predicates for doclet kinds taking part in relation resolution."""

SUBJECT_KINDS = frozenset({"class", "interface", "mixin", "typedef"})
MEMBER_OWNER_KINDS = frozenset({"class", "interface", "mixin"})


def is_relation_subject_kind(kind: str | None) -> bool:
    """Check if the kind gets nested relation arrays (class, typedef, etc.)."""
    return kind in SUBJECT_KINDS


def is_member_owner_kind(kind: str | None) -> bool:
    """Check if the kind can receive inherited, mixed or implemented members."""
    return kind in MEMBER_OWNER_KINDS
