from themecss.stylesheet.builder import StyleBuilder
from themecss.stylesheet.model import Declaration, Stylesheet, StyleRule

__all__ = ["Declaration", "StyleBuilder", "StyleRule", "Stylesheet"]
