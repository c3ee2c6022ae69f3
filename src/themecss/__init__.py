"""themecss - theme custom properties and :host selector normalization for CSS."""

from themecss.errors import InvalidStyleError, ThemeError
from themecss.model.config import DEFAULT_PALETTE, ThemeConfig, load_config
from themecss.model.value import CustomProperty
from themecss.selector import fix_host_selector, host_aware, needs_fix
from themecss.stylesheet import StyleBuilder, Stylesheet
from themecss.theme import ThemeResolver, deep_get

__version__ = "0.1.0"

__all__ = [
    "CustomProperty",
    "DEFAULT_PALETTE",
    "InvalidStyleError",
    "StyleBuilder",
    "Stylesheet",
    "ThemeConfig",
    "ThemeError",
    "ThemeResolver",
    "deep_get",
    "fix_host_selector",
    "host_aware",
    "load_config",
    "needs_fix",
]
