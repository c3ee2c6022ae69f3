"""Feature-targeting queries: decide which feature groups get emitted."""

from __future__ import annotations

from dataclasses import dataclass

# Feature names used by the theme resolver.
COLOR = "color"


@dataclass(frozen=True)
class FeatureQuery:
    """Select which features a build includes.

    ``include=None`` means every feature; ``exclude`` always wins.
    """

    include: frozenset[str] | None = None
    exclude: frozenset[str] = frozenset()

    def includes(self, feature: str) -> bool:
        if feature in self.exclude:
            return False
        return self.include is None or feature in self.include

    @classmethod
    def parse(cls, text: str) -> FeatureQuery:
        """Parse ``"color,typography"`` or ``"-color"`` style query strings.

        Names prefixed with ``-`` are excluded; if no plain names are given
        every other feature stays included.
        """
        include: set[str] = set()
        exclude: set[str] = set()
        for raw in text.split(","):
            name = raw.strip()
            if not name:
                continue
            if name.startswith("-"):
                exclude.add(name[1:].strip())
            else:
                include.add(name)
        return cls(
            include=frozenset(include) if include else None,
            exclude=frozenset(exclude),
        )
