"""Tests for link reference resolution."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from g4compose.core.errors import UnresolvedModuleError
from g4compose.core.link import (
    deduplicate,
    resolve_link_libraries,
    static_target_name,
    strip_self_reference,
    to_static_references,
)

PARENTS = {
    "G4globman": "G4global",
    "G4heprandom": "G4global",
    "G4intercoms": "G4intercoms",
    "G4track": None,
}


def test_modules_resolve_to_parent_category():
    resolved = resolve_link_libraries(["G4globman", "G4intercoms"], PARENTS)

    assert resolved == ["G4global", "G4intercoms"]


def test_non_module_references_pass_through():
    resolved = resolve_link_libraries(["CLHEP::CLHEP", "G4heprandom", "${ZLIB}"], PARENTS)

    assert resolved == ["CLHEP::CLHEP", "G4global", "${ZLIB}"]


def test_duplicates_collapse_to_first_occurrence():
    resolved = resolve_link_libraries(["G4globman", "Foo", "G4heprandom", "Foo"], PARENTS)

    assert resolved == ["G4global", "Foo"]


def test_uncomposed_module_raises():
    with pytest.raises(UnresolvedModuleError) as exc_info:
        resolve_link_libraries(["G4track"], PARENTS)

    assert exc_info.value.module == "G4track"


def test_strip_self_reference():
    assert strip_self_reference(["G4global", "G4intercoms"], "G4global") == ["G4intercoms"]


def test_static_rewrite_only_touches_known_libraries():
    rewritten = to_static_references(["G4global", "CLHEP::CLHEP"], ["G4global", "G4intercoms"])

    assert rewritten == ["G4global-static", "CLHEP::CLHEP"]


def test_static_target_name():
    assert static_target_name("G4global") == "G4global-static"


references = st.lists(
    st.sampled_from(["G4globman", "G4heprandom", "G4intercoms", "G4global", "Foo", "Bar"])
)


@given(refs=references)
def test_resolution_is_idempotent(refs):
    """PROPERTY: Resolving already resolved references changes nothing."""
    once = resolve_link_libraries(refs, PARENTS)

    assert resolve_link_libraries(once, PARENTS) == once


@given(refs=references)
def test_resolved_references_are_unique_and_contain_no_modules(refs):
    """PROPERTY: Output has no duplicates and no composed module names."""
    resolved = resolve_link_libraries(refs, PARENTS)

    assert len(resolved) == len(set(resolved))
    assert not set(resolved) & {"G4globman", "G4heprandom"}


@given(values=st.lists(st.text(min_size=1, max_size=5)))
def test_deduplicate_keeps_first_occurrence_order(values):
    """PROPERTY: deduplicate preserves the order of first occurrences."""
    result = deduplicate(values)

    assert set(result) == set(values)
    assert result == sorted(set(values), key=values.index)
