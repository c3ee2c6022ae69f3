"""Theme configuration: the role palette and custom property naming."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

from themecss.errors import ThemeError

# Material theme roles and their default values, in declaration order.
DEFAULT_PALETTE: dict[str, str] = {
    "primary": "#6200ee",
    "secondary": "#018786",
    "background": "#fff",
    "surface": "#fff",
    "error": "#b00020",
    "on-primary": "#fff",
    "on-secondary": "#fff",
    "on-surface": "#000",
    "on-error": "#fff",
    "text-primary-on-background": "rgba(0, 0, 0, 0.87)",
    "text-secondary-on-background": "rgba(0, 0, 0, 0.54)",
    "text-hint-on-background": "rgba(0, 0, 0, 0.38)",
    "text-disabled-on-background": "rgba(0, 0, 0, 0.38)",
    "text-icon-on-background": "rgba(0, 0, 0, 0.38)",
    "text-primary-on-light": "rgba(0, 0, 0, 0.87)",
    "text-secondary-on-light": "rgba(0, 0, 0, 0.54)",
    "text-hint-on-light": "rgba(0, 0, 0, 0.38)",
    "text-disabled-on-light": "rgba(0, 0, 0, 0.38)",
    "text-icon-on-light": "rgba(0, 0, 0, 0.38)",
    "text-primary-on-dark": "white",
    "text-secondary-on-dark": "rgba(255, 255, 255, 0.7)",
    "text-hint-on-dark": "rgba(255, 255, 255, 0.5)",
    "text-disabled-on-dark": "rgba(255, 255, 255, 0.5)",
    "text-icon-on-dark": "rgba(255, 255, 255, 0.5)",
}


@dataclass(frozen=True)
class ThemeConfig:
    """Configuration for a theme resolver.

    Each resolver owns its config, so several themes can coexist in one
    process.
    """

    palette: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PALETTE))
    prefix: str = "theme"
    emit_root_definitions: bool = True

    def custom_property_name(self, role: str) -> str:
        return f"--{self.prefix}-{role}"

    def with_palette(self, **overrides: str) -> ThemeConfig:
        """Return a copy with *overrides* merged into the palette.

        Keyword names use underscores; they map to dashed role names.
        """
        palette = dict(self.palette)
        for key, value in overrides.items():
            palette[key.replace("_", "-")] = value
        return replace(self, palette=palette)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ThemeConfig:
        """Build a config from a plain mapping (e.g. parsed JSON)."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ThemeError(f"Unknown config keys: {', '.join(unknown)}")
        kwargs: dict[str, Any] = dict(data)
        if "prefix" in kwargs and not isinstance(kwargs["prefix"], str):
            raise ThemeError("Config 'prefix' must be a string")
        if "emit_root_definitions" in kwargs and not isinstance(
            kwargs["emit_root_definitions"], bool
        ):
            raise ThemeError("Config 'emit_root_definitions' must be true or false")
        if "palette" in kwargs:
            palette = kwargs["palette"]
            if not isinstance(palette, Mapping):
                raise ThemeError("Config 'palette' must be a mapping of role to value")
            for role, value in palette.items():
                if not isinstance(role, str) or not isinstance(value, str):
                    raise ThemeError(
                        f"Config palette entry {role!r} must map a string role to a string value"
                    )
            kwargs["palette"] = dict(palette)
        return cls(**kwargs)


def load_config(path: str | Path) -> ThemeConfig:
    """Load a :class:`ThemeConfig` from a JSON file."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ThemeError(f"Invalid JSON in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ThemeError(f"Config in {config_path} must be a JSON object")
    return ThemeConfig.from_mapping(data)
