"""Capture-group tree over a compiled ``regex`` pattern.

A placeholder's fragment may itself contain capture groups (``{string}``
does), so the flat group numbering of a match does not line up with the
placeholder list.  ``TreeRegexp`` scans the pattern source once, records the
nesting of *capturing* groups, and rebuilds that nesting for every match.
The top-level children of the root group are then exactly the placeholder
captures.

Scanning rules::

    \\x         escaped – never opens/closes a group
    [ ... ]     character class – parentheses inside are literal, as is a
                leading ] (``[]...]``, ``[^]...]``)
    (?P<n>...)  named group – capturing, also ``(?<n>...)`` and ``(?'n'...)``
    (?...)      any other extension – non-capturing, children move up
    ( ... )     capturing
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Iterator, List, Optional

import regex


@dataclass
class Group:
    """One capturing group of a successful match.

    ``value`` is ``None`` (and ``start``/``end`` are ``-1``) when the group did
    not participate in the match.
    """

    value: Optional[str]
    start: int
    end: int
    children: List['Group'] = field(default_factory=list)

    @property
    def values(self) -> List[Optional[str]]:
        """Child values, or ``[self.value]`` for a leaf group."""
        return [c.value for c in self.children] if self.children else [self.value]


class GroupBuilder:
    """Static description of a capturing group and its capturing descendants."""

    def __init__(self) -> None:
        self.children: List[GroupBuilder] = []
        self.capturing = True
        self.source: Optional[str] = None

    def add(self, child: 'GroupBuilder') -> None:
        self.children.append(child)

    def move_children_to(self, parent: 'GroupBuilder') -> None:
        for child in self.children:
            parent.add(child)

    def build(self, match: 'regex.Match', group_indices: Iterator[int]) -> Group:
        index = next(group_indices)
        start, end = match.span(index)
        children = [child.build(match, group_indices) for child in self.children]
        return Group(match.group(index), start, end, children)


def _opens_capturing_group(source: str, i: int) -> bool:
    """Whether the ``(`` at *i* starts a capturing group."""
    if not source.startswith("?", i + 1):
        return True
    if source.startswith(("?P<", "?'"), i + 1):
        return True
    # (?<name>...) captures; (?<=...) and (?<!...) are lookbehinds.
    return source.startswith("?<", i + 1) and not source.startswith(("?<=", "?<!"), i + 1)


def _scan_groups(source: str) -> GroupBuilder:
    stack: List[GroupBuilder] = [GroupBuilder()]
    starts: List[int] = []
    escaping = False
    char_class = False
    class_start = 0

    for i, c in enumerate(source):
        if escaping:
            escaping = False
            continue
        if c == "\\":
            escaping = True
        elif char_class:
            # A ] first in the class, after [ or [^, is literal.
            if c == "]" and i != class_start:
                char_class = False
        elif c == "[":
            char_class = True
            class_start = i + 2 if source.startswith("^", i + 1) else i + 1
        elif c == "(":
            builder = GroupBuilder()
            builder.capturing = _opens_capturing_group(source, i)
            stack.append(builder)
            starts.append(i + 1)
        elif c == ")":
            builder = stack.pop()
            start = starts.pop()
            if builder.capturing:
                builder.source = source[start:i]
                stack[-1].add(builder)
            else:
                builder.move_children_to(stack[-1])

    root = stack.pop()
    root.source = source
    return root


class TreeRegexp:
    """Compiled pattern plus its capture-group tree.

    ::

        tree = TreeRegexp(r"^I have (\\d+) cukes?$")
        group = tree.match("I have 7 cukes")
        group.children[0].value    # '7'
    """

    def __init__(self, pattern: str) -> None:
        self.regexp = regex.compile(pattern)
        self.group_builder = _scan_groups(pattern)

    @property
    def pattern(self) -> str:
        return self.regexp.pattern

    def match(self, text: str, timeout: Optional[float] = None) -> Optional[Group]:
        """Match *text* and return the root ``Group`` or ``None``.

        Raises ``TimeoutError`` if the engine exceeds *timeout* seconds.
        """
        try:
            m = self.regexp.match(text, timeout=timeout)
        except TimeoutError:
            raise TimeoutError(f"Regex operation exceeded timeout of {timeout}s") from None
        if m is None:
            return None
        return self.group_builder.build(m, count())
