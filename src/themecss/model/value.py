"""Theme property values: literals, theme-role keys and custom properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union


@dataclass(frozen=True)
class CustomProperty:
    """A CSS custom property reference with an optional static fallback.

    Attributes:
        name: Variable name; a leading ``--`` is added when missing.
        fallback: Literal used when the variable is unset, if any.
        annotations: GSS annotations attached to every declaration that
            uses this property (``{"noflip": True}`` -> ``/* @noflip */``).
    """

    name: str
    fallback: str | None = None
    annotations: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name.startswith("--"):
            object.__setattr__(self, "name", f"--{self.name}")

    def var(self) -> str:
        """Return the ``var()`` expression for this property."""
        if self.fallback is None:
            return f"var({self.name})"
        return f"var({self.name}, {self.fallback})"

    def __str__(self) -> str:
        return self.var()


# A literal CSS value, a theme-role key, or a custom property.
ThemeValue = Union[str, CustomProperty]


def render_annotations(annotations: Mapping[str, object] | None) -> list[str]:
    """Render GSS annotations as ``@name`` / ``@name value`` strings.

    Annotations whose value is ``False`` or ``None`` are skipped.
    """
    if not annotations:
        return []
    rendered: list[str] = []
    for name, value in annotations.items():
        if value is None or value is False:
            continue
        if value is True:
            rendered.append(f"@{name}")
        else:
            rendered.append(f"@{name} {value}")
    return rendered
