"""Tests for nested relation arrays and descendants."""

import copy

import pytest

from relation_fixer.build_relations import build_relations
from relation_fixer.relation_cycle_error import RelationCycleError


def _by_longname(doclets: list[dict]) -> dict[str, dict]:
    return {d["longname"]: d for d in doclets}


def test_single_augments() -> None:
    """Verify the basic subclass scenario."""
    doclets = [
        {"longname": "Animal", "kind": "class"},
        {
            "longname": "Animal#speak",
            "memberof": "Animal",
            "kind": "function",
            "scope": "instance",
        },
        {"longname": "Dog", "kind": "class", "augments": ["Animal"]},
    ]

    result = _by_longname(build_relations(doclets))

    assert result["Dog"]["augmentsNested"] == ["Animal"]
    assert result["Dog"]["implementsNested"] == []
    assert result["Dog"]["mixesNested"] == []
    assert result["Animal"]["descendants"] == ["Dog"]
    assert result["Dog"]["descendants"] == []
    # Members are not subjects.
    assert "augmentsNested" not in result["Animal#speak"]


def test_nested_relations_are_transitive() -> None:
    """Verify that implements and augments propagate through the chain."""
    doclets = [
        {"longname": "InterfaceC", "kind": "interface"},
        {"longname": "ClassA", "kind": "class", "implements": ["InterfaceC"]},
        {"longname": "ClassB", "kind": "class", "augments": ["ClassA"]},
        {"longname": "ClassD", "kind": "class", "augments": ["ClassB"]},
    ]

    result = _by_longname(build_relations(doclets))

    assert result["ClassB"]["implementsNested"] == ["InterfaceC"]
    assert result["ClassD"]["augmentsNested"] == ["ClassB", "ClassA"]
    assert result["ClassD"]["implementsNested"] == ["InterfaceC"]
    assert result["InterfaceC"]["descendants"] == ["ClassA", "ClassB", "ClassD"]
    assert result["ClassA"]["descendants"] == ["ClassB", "ClassD"]


def test_mixins_propagate() -> None:
    """Verify that mixins of ancestors end up in mixesNested."""
    doclets = [
        {"longname": "Emitter", "kind": "mixin"},
        {"longname": "Base", "kind": "class", "mixes": ["Emitter"]},
        {"longname": "Child", "kind": "class", "augments": ["Base"]},
    ]

    result = _by_longname(build_relations(doclets))

    assert result["Child"]["mixesNested"] == ["Emitter"]
    assert result["Emitter"]["descendants"] == ["Base", "Child"]


def test_augments_does_not_cross_kinds() -> None:
    """Verify that augmentsNested stops at an ancestor of a different kind."""
    doclets = [
        {"longname": "C", "kind": "class"},
        {"longname": "B", "kind": "interface", "augments": ["C"]},
        {"longname": "A", "kind": "class", "augments": ["B"]},
    ]

    result = _by_longname(build_relations(doclets))

    assert result["A"]["augmentsNested"] == ["B"]
    assert "C" not in result["A"]["augmentsNested"]
    assert result["C"]["descendants"] == ["B"]


def test_kind_gate_only_applies_to_augments() -> None:
    """Verify that implements and mixes still cross differently-kinded ancestors."""
    doclets = [
        {"longname": "Observable", "kind": "interface"},
        {"longname": "Emitter", "kind": "mixin"},
        {
            "longname": "Base",
            "kind": "interface",
            "implements": ["Observable"],
            "mixes": ["Emitter"],
        },
        {"longname": "Impl", "kind": "class", "augments": ["Base"]},
    ]

    result = _by_longname(build_relations(doclets))

    assert result["Impl"]["augmentsNested"] == ["Base"]
    assert result["Impl"]["implementsNested"] == ["Observable"]
    assert result["Impl"]["mixesNested"] == ["Emitter"]


def test_no_duplicates_for_diamonds() -> None:
    """Verify that an ancestor reached twice is listed once."""
    doclets = [
        {"longname": "Root", "kind": "interface"},
        {"longname": "Left", "kind": "interface", "augments": ["Root"]},
        {"longname": "Right", "kind": "interface", "augments": ["Root"]},
        {"longname": "Leaf", "kind": "interface", "augments": ["Left", "Right"]},
    ]

    result = _by_longname(build_relations(doclets))

    assert result["Leaf"]["augmentsNested"] == ["Left", "Right", "Root"]
    assert result["Root"]["descendants"] == ["Left", "Right", "Leaf"]


def test_dangling_reference_is_tolerated() -> None:
    """Verify that unknown ancestors are kept as names without traversal."""
    doclets = [{"longname": "A", "kind": "class", "augments": ["external:Missing"]}]

    result = _by_longname(build_relations(doclets))

    assert result["A"]["augmentsNested"] == ["external:Missing"]


def test_input_is_not_mutated() -> None:
    """Verify that relation arrays are set on copies only."""
    doclets = [
        {"longname": "P", "kind": "class"},
        {"longname": "C", "kind": "class", "augments": ["P"]},
    ]
    snapshot = copy.deepcopy(doclets)

    build_relations(doclets)

    assert doclets == snapshot


def test_idempotent_on_own_output() -> None:
    """Verify that closed relation arrays are a fixed point."""
    doclets = [
        {"longname": "I", "kind": "interface"},
        {"longname": "M", "kind": "mixin"},
        {"longname": "P", "kind": "class", "implements": ["I"], "mixes": ["M"]},
        {"longname": "C", "kind": "class", "augments": ["P"]},
        {"longname": "T1", "kind": "typedef"},
        {"longname": "T2", "kind": "typedef", "augments": ["T1"]},
    ]

    once = build_relations(doclets)
    twice = build_relations(once)

    assert once == twice


def test_descendant_symmetry() -> None:
    """Verify that every ancestor lists the doclet among its descendants."""
    doclets = [
        {"longname": "I", "kind": "interface"},
        {"longname": "M", "kind": "mixin", "implements": ["I"]},
        {"longname": "P", "kind": "class", "mixes": ["M"]},
        {"longname": "C", "kind": "class", "augments": ["P"], "implements": ["I"]},
    ]

    result = _by_longname(build_relations(doclets))

    for doclet in result.values():
        ancestors = (
            doclet["augmentsNested"]
            + doclet["implementsNested"]
            + doclet["mixesNested"]
        )
        for ancestor in ancestors:
            assert doclet["longname"] in result[ancestor]["descendants"]


def test_subject_kinds_can_be_narrowed() -> None:
    """Verify that only the configured kinds get relation arrays."""
    doclets = [
        {"longname": "T1", "kind": "typedef"},
        {"longname": "T2", "kind": "typedef", "augments": ["T1"]},
    ]

    result = _by_longname(build_relations(doclets, subject_kinds=["class"]))

    assert "augmentsNested" not in result["T2"]


def test_cycle_raises() -> None:
    """Verify that a circular augments chain is reported."""
    doclets = [
        {"longname": "A", "kind": "class", "augments": ["B"]},
        {"longname": "B", "kind": "class", "augments": ["A"]},
    ]

    with pytest.raises(RelationCycleError) as excinfo:
        build_relations(doclets)

    assert excinfo.value.cycle == ["A", "B", "A"]
    assert "A -> B -> A" in str(excinfo.value)


def test_self_reference_raises() -> None:
    """Verify that a doclet mixing itself is reported."""
    doclets = [{"longname": "M", "kind": "mixin", "mixes": ["M"]}]

    with pytest.raises(RelationCycleError):
        build_relations(doclets)


def test_stacked_diamonds_stay_small() -> None:
    """Verify that deep diamond stacks give compact, duplicate-free arrays."""
    levels = 30
    doclets = [
        {"longname": "X0", "kind": "interface"},
        {"longname": "Y0", "kind": "interface"},
    ]
    for i in range(1, levels + 1):
        parents = [f"X{i - 1}", f"Y{i - 1}"]
        for name in (f"X{i}", f"Y{i}"):
            doclets.append({"longname": name, "kind": "interface", "augments": parents})

    result = _by_longname(build_relations(doclets))

    top = result[f"X{levels}"]["augmentsNested"]
    assert len(top) == 2 * levels
    assert top[:2] == [f"X{levels - 1}", f"Y{levels - 1}"]
    assert top[2:4] == [f"X{levels - 2}", f"Y{levels - 2}"]
    assert top[-2:] == ["X0", "Y0"]
    assert len(result["X0"]["descendants"]) == 2 * levels
