"""Normalization of compound ``:host`` selectors.

``:host`` only accepts its compound selector as an argument, so
``:host:hover`` and ``:host([outlined]):hover`` are invalid CSS. They are
rewritten as ``:host(:hover)`` and ``:host([outlined]:hover)``. Only the
first compound of a selector is inspected; ``:host button`` is left alone
because the descendant is not part of the host match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from themecss.selector.parser import (
    SelectorInput,
    find_paren_span,
    first_compound_end,
    flatten_selector_lists,
)

__all__ = [
    "HostSelector",
    "fix_host_selector",
    "host_aware",
    "needs_fix",
    "parse_host_selector",
]

logger = logging.getLogger(__name__)

_HOST = ":host"


@dataclass(frozen=True)
class HostSelector:
    """A selector whose first compound starts with ``:host``.

    Attributes:
        argument: Text inside ``:host(...)``, or ``None`` for a bare ``:host``.
        trailing: Simple selectors following ``:host`` / ``:host(...)``
            within the first compound.
        rest: Combinator and later compounds, kept verbatim.
        closed: False when the ``:host(`` group never closes.
    """

    argument: str | None
    trailing: str
    rest: str = ""
    closed: bool = True

    @property
    def needs_fix(self) -> bool:
        return bool(self.trailing) or not self.closed

    def fixed(self) -> str:
        """Return the selector with trailing content merged into ``:host()``."""
        if not self.needs_fix:
            return str(self)
        return f"{_HOST}({self.argument or ''}{self.trailing}){self.rest}"

    def __str__(self) -> str:
        if self.argument is None:
            head = _HOST
        elif self.closed:
            head = f"{_HOST}({self.argument})"
        else:
            head = f"{_HOST}({self.argument}"
        return f"{head}{self.trailing}{self.rest}"


def parse_host_selector(selector: str) -> HostSelector | None:
    """Parse *selector* into a :class:`HostSelector`.

    Returns ``None`` when the first compound does not start with the
    ``:host`` pseudo-class (``:host-context(...)`` is a different one).
    """
    selector = selector.strip()
    if not selector.startswith(_HOST):
        return None
    after = selector[len(_HOST):]
    if after and (after[0].isalnum() or after[0] in "-_"):
        return None

    end = first_compound_end(selector)
    compound, rest = selector[:end], selector[end:]

    if not compound.startswith(f"{_HOST}("):
        return HostSelector(argument=None, trailing=compound[len(_HOST):], rest=rest)

    span = find_paren_span(compound, len(_HOST))
    if span is None:
        # Unclosed group: everything after "(" is taken as the argument.
        return HostSelector(
            argument=compound[len(_HOST) + 1:],
            trailing="",
            rest=rest,
            closed=False,
        )
    return HostSelector(
        argument=span.inner(compound),
        trailing=compound[span.end + 1:],
        rest=rest,
    )


def needs_fix(selector: str) -> bool:
    """Return True if *selector* has content trailing ``:host`` or ``:host(...)``."""
    parsed = parse_host_selector(selector)
    return parsed is not None and parsed.needs_fix


def fix_host_selector(selector: str) -> str:
    """Merge trailing simple selectors into the ``:host()`` argument.

    Selectors that need no fix are returned unchanged (stripped).
    """
    parsed = parse_host_selector(selector)
    if parsed is None or not parsed.needs_fix:
        return selector.strip()
    fixed = parsed.fixed()
    logger.debug("Rewrote host selector %r -> %r", selector, fixed)
    return fixed


def host_aware(*selector_lists: SelectorInput) -> list[str]:
    """Combine *selector_lists* into one list with every ``:host`` selector fixed.

    Each argument is either CSS selector-list text or a sequence of
    selectors. Order is preserved and exact duplicates are dropped.
    """
    selectors = flatten_selector_lists(selector_lists)
    return flatten_selector_lists([[fix_host_selector(s) for s in selectors]])
