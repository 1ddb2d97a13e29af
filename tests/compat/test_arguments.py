"""Tests for keyword argument-list parsing."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from g4compose.compat import parse_arguments
from g4compose.core.errors import UnparsedArgumentsError


def test_multi_value_collects_until_next_keyword():
    parsed = parse_arguments(
        "cmd",
        ["PUBLIC", "a", "b", "PRIVATE", "c"],
        multi_value=("PUBLIC", "PRIVATE", "INTERFACE"),
    )

    assert parsed.multi("PUBLIC") == ["a", "b"]
    assert parsed.multi("PRIVATE") == ["c"]
    assert parsed.multi("INTERFACE") == []


def test_repeated_keyword_accumulates():
    parsed = parse_arguments("cmd", ["SOURCES", "a", "SOURCES", "b"], multi_value=("SOURCES",))

    assert parsed.multi("SOURCES") == ["a", "b"]


def test_options_and_single_values():
    parsed = parse_arguments(
        "cmd",
        ["APPEND", "NAME", "G4global", "PROPERTY", "SOURCES", "x.cc"],
        options=("APPEND", "APPEND_STRING"),
        one_value=("NAME",),
        multi_value=("PROPERTY",),
    )

    assert parsed.flag("APPEND")
    assert not parsed.flag("APPEND_STRING")
    assert parsed.value("NAME") == "G4global"
    assert parsed.value("OTHER") is None
    assert parsed.multi("PROPERTY") == ["SOURCES", "x.cc"]


def test_leftover_tokens_raise_in_strict_mode():
    with pytest.raises(UnparsedArgumentsError, match="'stray;other'"):
        parse_arguments("geant4_add_category", ["stray", "other"], multi_value=("MODULES",))


def test_leftover_tokens_kept_when_not_strict():
    parsed = parse_arguments("cmd", ["NAME", "a", "b"], one_value=("NAME",), strict=False)

    assert parsed.value("NAME") == "a"
    assert parsed.unparsed == ["b"]


keyword_lists = st.lists(
    st.tuples(
        st.sampled_from(["SOURCES", "HEADERS"]),
        st.lists(st.text(alphabet="abcxyz.", min_size=1, max_size=6), max_size=4),
    ),
    max_size=5,
)


@given(groups=keyword_lists)
def test_multi_value_groups_concatenate(groups):
    """PROPERTY: Values of repeated keywords concatenate in order, nothing is lost."""
    args = [token for keyword, values in groups for token in (keyword, *values)]

    parsed = parse_arguments("cmd", args, multi_value=("SOURCES", "HEADERS"))

    for keyword in ("SOURCES", "HEADERS"):
        expected = [v for k, values in groups if k == keyword for v in values]
        assert parsed.multi(keyword) == expected
    assert parsed.unparsed == []
