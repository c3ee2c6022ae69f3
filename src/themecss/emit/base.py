"""Protocols for the collaborators the resolver emits through."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol

from themecss.model.value import CustomProperty

if TYPE_CHECKING:
    from themecss.stylesheet.builder import StyleBuilder


class CustomPropertyEmitter(Protocol):
    """Writes a declaration that uses a custom property into a builder."""

    def emit(
        self,
        builder: StyleBuilder,
        property: str,
        custom_property: CustomProperty,
        annotations: Mapping[str, object] | None = None,
        important: bool = False,
    ) -> None: ...
