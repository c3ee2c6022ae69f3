"""Error hierarchy for theme resolution."""
from __future__ import annotations

from typing import Iterable


class ThemeError(Exception):
    """Base error for all themecss errors."""

    def __init__(self, message: str, *, property: str | None = None) -> None:
        super().__init__(message)
        self.property = property


class InvalidStyleError(ThemeError):
    """A style key is neither a CSS value nor a known theme role."""

    def __init__(
        self,
        style: str,
        valid_keys: Iterable[str],
        *,
        property: str | None = None,
    ) -> None:
        self.style = style
        self.valid_keys = tuple(valid_keys)
        message = (
            f"Invalid style: '{style}'. Choose one of: {', '.join(self.valid_keys)}"
        )
        super().__init__(message, property=property)
