from themecss.model.config import DEFAULT_PALETTE, ThemeConfig, load_config
from themecss.model.value import CustomProperty, ThemeValue, render_annotations

__all__ = [
    "CustomProperty",
    "DEFAULT_PALETTE",
    "ThemeConfig",
    "ThemeValue",
    "load_config",
    "render_annotations",
]
