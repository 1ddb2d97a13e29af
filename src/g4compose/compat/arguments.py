"""Keyword argument-list parsing in the style of CMake's cmake_parse_arguments.

Usage:
    parsed = parse_arguments(
        "geant4_add_category",
        ["MODULES", "G4globman", "G4heprandom"],
        multi_value=("MODULES",),
    )
    parsed.multi("MODULES")  # ["G4globman", "G4heprandom"]
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from g4compose.core.errors import UnparsedArgumentsError


@dataclass
class ParsedArguments:
    """Result of parsing a keyword argument list.

    Keywords that were not given are absent, so ``flag`` is False, ``value``
    is None and ``multi`` is empty for them.
    """

    options: set[str] = field(default_factory=set)
    values: dict[str, str] = field(default_factory=dict)
    lists: dict[str, list[str]] = field(default_factory=dict)
    unparsed: list[str] = field(default_factory=list)

    def flag(self, keyword: str) -> bool:
        return keyword in self.options

    def value(self, keyword: str) -> str | None:
        return self.values.get(keyword)

    def multi(self, keyword: str) -> list[str]:
        return list(self.lists.get(keyword, []))


def parse_arguments(
    command: str,
    args: Sequence[str],
    *,
    options: Sequence[str] = (),
    one_value: Sequence[str] = (),
    multi_value: Sequence[str] = (),
    strict: bool = True,
) -> ParsedArguments:
    """Split a flat argument list into keyword groups.

    Args:
        command: Command name, used in error messages.
        args: Flat list of tokens.
        options: Keywords that take no value.
        one_value: Keywords taking exactly one value.
        multi_value: Keywords taking any number of values, up to the next keyword.
        strict: Raise if any token is not consumed by a keyword.

    Returns:
        Parsed arguments.

    Raises:
        UnparsedArgumentsError: If strict and tokens were left over.
    """
    keywords = set(options) | set(one_value) | set(multi_value)
    parsed = ParsedArguments()
    current: str | None = None
    awaiting_value = False

    for token in args:
        if token in keywords:
            current = token
            awaiting_value = token in one_value
            if token in options:
                parsed.options.add(token)
                current = None
            elif token in multi_value:
                parsed.lists.setdefault(token, [])
            continue

        if current is not None and current in multi_value:
            parsed.lists[current].append(token)
        elif current is not None and awaiting_value:
            parsed.values[current] = token
            awaiting_value = False
        else:
            parsed.unparsed.append(token)

    if strict and parsed.unparsed:
        raise UnparsedArgumentsError(command, parsed.unparsed)
    return parsed
