"""Append-only stylesheet builder with Sass-like nesting."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping

from themecss.emit.feature import FeatureQuery
from themecss.errors import ThemeError
from themecss.selector import host_aware, nest_selectors
from themecss.selector.parser import SelectorInput, flatten_selector_lists
from themecss.stylesheet.model import Declaration, Stylesheet, StyleRule

logger = logging.getLogger(__name__)


class StyleBuilder:
    """Accumulate rules and declarations, then render them as CSS.

    Usage::

        builder = StyleBuilder()
        with builder.rule(":host([outlined]), :host, :host button"):
            hover = append_selector(builder.current_selectors, ":hover")
            with builder.host_aware(builder.current_selectors, hover):
                builder.declare("color", "red")
        print(builder.render())
    """

    def __init__(self, query: FeatureQuery | None = None) -> None:
        self.query = query or FeatureQuery()
        self._root: dict[str, str] = {}
        self._rules: list[tuple[list[str], list[Declaration]]] = []
        self._stack: list[int] = []
        self._features: list[str] = []

    # --- selector context -----------------------------------------------------

    @property
    def current_selectors(self) -> list[str]:
        """The selectors of the innermost open rule (Sass ``&``)."""
        if not self._stack:
            return []
        return list(self._rules[self._stack[-1]][0])

    def _open(self, selectors: list[str]) -> int:
        self._rules.append((selectors, []))
        return len(self._rules) - 1

    @contextmanager
    def rule(self, selectors: SelectorInput) -> Iterator[list[str]]:
        """Open a rule nested inside the current one."""
        combined = nest_selectors(self.current_selectors, selectors)
        self._stack.append(self._open(combined))
        try:
            yield combined
        finally:
            self._stack.pop()

    @contextmanager
    def at_root(self, selectors: SelectorInput) -> Iterator[list[str]]:
        """Open a rule at the top level, ignoring the enclosing selectors."""
        flat = flatten_selector_lists([selectors])
        self._stack.append(self._open(flat))
        try:
            yield flat
        finally:
            self._stack.pop()

    @contextmanager
    def host_aware(self, *selector_lists: SelectorInput) -> Iterator[list[str]]:
        """Open a root-level rule for *selector_lists* with ``:host`` selectors fixed."""
        with self.at_root(host_aware(*selector_lists)) as selectors:
            yield selectors

    # --- feature targeting ----------------------------------------------------

    @contextmanager
    def targets(self, feature: str) -> Iterator[bool]:
        """Gate declarations inside the block on *feature* being queried.

        Yields whether the feature is currently emitted.
        """
        self._features.append(feature)
        try:
            yield self._emitting()
        finally:
            self._features.pop()

    def _emitting(self) -> bool:
        return all(self.query.includes(f) for f in self._features)

    # --- output ---------------------------------------------------------------

    def declare(
        self,
        property: str,
        value: str,
        important: bool = False,
        annotations: Mapping[str, object] | None = None,
    ) -> None:
        """Append a declaration to the innermost open rule."""
        if not self._stack:
            raise ThemeError(
                f"Cannot declare '{property}' outside of a rule", property=property
            )
        if not self._emitting():
            logger.debug("Dropped %s: features %s not queried", property, self._features)
            return
        declaration = Declaration(
            property=property,
            value=value,
            important=important,
            annotations=dict(annotations or {}),
        )
        self._rules[self._stack[-1]][1].append(declaration)

    def define_root(self, name: str, value: str) -> None:
        """Record a custom property definition for the ``:root`` block.

        The first definition of a name wins.
        """
        if not self._emitting():
            return
        self._root.setdefault(name, value)

    def build(self) -> Stylesheet:
        return Stylesheet(
            root=dict(self._root),
            rules=[
                StyleRule(selectors=list(selectors), declarations=list(declarations))
                for selectors, declarations in self._rules
            ],
        )

    def render(self) -> str:
        return self.build().render()
