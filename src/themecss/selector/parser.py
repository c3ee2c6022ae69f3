"""Lightweight scanning helpers for CSS selector text.

These are not a CSS parser. They know just enough about selector syntax
(parenthesis groups, attribute brackets, quoted strings, combinators) to
split selector lists and isolate the first compound selector.

Grammar handled:
    SelectorList = Selector ( ',' Selector )*
    Selector     = Compound ( Combinator Compound )*
    Combinator   = whitespace | '>' | '+' | '~'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

__all__ = [
    "ParenSpan",
    "SelectorInput",
    "append_selector",
    "find_paren_span",
    "first_compound_end",
    "flatten_selector_lists",
    "nest_selectors",
    "split_selector_list",
]

_COMBINATORS = frozenset(">+~")
_OPENERS = {"(": ")", "[": "]"}

# A selector list given as CSS text ("a, b") or as already-split selectors.
SelectorInput = Union[str, Sequence[str]]


@dataclass(frozen=True)
class ParenSpan:
    """Offsets of a parenthesis group: ``text[start] == "("``, ``text[end] == ")"``."""

    start: int
    end: int

    def inner(self, text: str) -> str:
        return text[self.start + 1:self.end]


def _skip_string(text: str, index: int) -> int:
    """Return the index just past the quoted string starting at *index*."""
    quote = text[index]
    i = index + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return len(text)


def _top_level_positions(text: str):
    """Yield ``(index, char)`` for characters outside groups and strings."""
    stack: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in "\"'":
            i = _skip_string(text, i)
            continue
        if ch == "\\":
            i += 2
            continue
        if ch in _OPENERS:
            stack.append(_OPENERS[ch])
        elif stack and ch == stack[-1]:
            stack.pop()
        elif not stack:
            yield i, ch
        i += 1


def find_paren_span(text: str, open_index: int) -> ParenSpan | None:
    """Find the parenthesis matching ``text[open_index]``.

    Nested groups, brackets and quoted strings are skipped. Returns ``None``
    when the group is never closed.
    """
    if open_index >= len(text) or text[open_index] != "(":
        raise ValueError(f"No '(' at index {open_index} in {text!r}")
    depth = 0
    i = open_index
    while i < len(text):
        ch = text[i]
        if ch in "\"'":
            i = _skip_string(text, i)
            continue
        if ch == "\\":
            i += 2
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return ParenSpan(start=open_index, end=i)
        i += 1
    return None


def split_selector_list(text: str) -> list[str]:
    """Split a comma-separated selector list into stripped selectors."""
    parts: list[str] = []
    start = 0
    for index, ch in _top_level_positions(text):
        if ch == ",":
            parts.append(text[start:index])
            start = index + 1
    parts.append(text[start:])
    return [p.strip() for p in parts if p.strip()]


def first_compound_end(selector: str) -> int:
    """Return the index where the first compound selector ends.

    That is the first top-level whitespace or combinator character, or
    ``len(selector)`` for a single compound.
    """
    for index, ch in _top_level_positions(selector):
        if ch.isspace() or ch in _COMBINATORS:
            return index
    return len(selector)


def flatten_selector_lists(selector_lists: Iterable[SelectorInput]) -> list[str]:
    """Concatenate selector lists, dropping exact duplicates but keeping order."""
    result: list[str] = []
    seen: set[str] = set()
    for selector_list in selector_lists:
        if isinstance(selector_list, str):
            selectors = split_selector_list(selector_list)
        else:
            selectors = [s.strip() for s in selector_list if s.strip()]
        for selector in selectors:
            if selector not in seen:
                seen.add(selector)
                result.append(selector)
    return result


def append_selector(selectors: SelectorInput, suffix: str) -> list[str]:
    """Append *suffix* to every selector, like Sass ``selector.append``."""
    return [f"{s}{suffix}" for s in flatten_selector_lists([selectors])]


def nest_selectors(parents: SelectorInput, children: SelectorInput) -> list[str]:
    """Combine parent and child selectors the way Sass nesting does.

    ``&`` in a child is replaced by each parent; otherwise the child becomes
    a descendant of each parent. With no parents the children stand alone.
    """
    parent_list = flatten_selector_lists([parents])
    child_list = flatten_selector_lists([children])
    if not parent_list:
        return child_list
    combined: list[str] = []
    for parent in parent_list:
        for child in child_list:
            nested = _replace_parent_reference(child, parent)
            combined.append(nested if nested is not None else f"{parent} {child}")
    return flatten_selector_lists([combined])


def _replace_parent_reference(selector: str, parent: str) -> str | None:
    """Substitute *parent* for each ``&`` outside quoted strings.

    Returns ``None`` when *selector* has no parent reference.
    """
    parts: list[str] = []
    found = False
    start = 0
    i = 0
    while i < len(selector):
        ch = selector[i]
        if ch in "\"'":
            i = _skip_string(selector, i)
            continue
        if ch == "\\":
            i += 2
            continue
        if ch == "&":
            parts.append(selector[start:i])
            parts.append(parent)
            found = True
            start = i + 1
        i += 1
    if not found:
        return None
    parts.append(selector[start:])
    return "".join(parts)
