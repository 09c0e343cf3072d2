"""Tests for field lookup along the augments chain."""

from relation_fixer.does_field_exist_in_class import does_field_exist_in_class

DOCLETS = [
    {"longname": "Base", "kind": "class"},
    {"longname": "Base#baseField", "kind": "member"},
    {"longname": "Middle", "kind": "class", "augments": ["Base"]},
    {"longname": "Leaf", "kind": "class", "augments": ["Middle"]},
    {"longname": "Leaf#leafField", "kind": "member"},
]


def test_own_field() -> None:
    """Verify that a field declared by the class itself is found."""
    assert does_field_exist_in_class(DOCLETS, "Leaf#leafField")


def test_inherited_field() -> None:
    """Verify that a field of a grandparent is found."""
    assert does_field_exist_in_class(DOCLETS, "Leaf#baseField")


def test_unknown_field_or_class() -> None:
    """Verify that missing fields and classes return False."""
    assert not does_field_exist_in_class(DOCLETS, "Leaf#nope")
    assert not does_field_exist_in_class(DOCLETS, "Nope#baseField")
    assert not does_field_exist_in_class(DOCLETS, "Middle#leafField")


def test_circular_chain_terminates() -> None:
    """Verify that a circular augments chain ends the walk."""
    doclets = [
        {"longname": "A", "kind": "class", "augments": ["B"]},
        {"longname": "B", "kind": "class", "augments": ["A"]},
    ]
    assert not does_field_exist_in_class(doclets, "A#x")
