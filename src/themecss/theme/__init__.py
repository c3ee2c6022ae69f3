from themecss.theme.lookup import deep_get
from themecss.theme.resolver import ThemeResolver
from themecss.theme.values import is_valid_css_value

__all__ = ["ThemeResolver", "deep_get", "is_valid_css_value"]
