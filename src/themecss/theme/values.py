"""Recognition of literal CSS values accepted by the legacy ``prop`` path."""

from __future__ import annotations

import re

__all__ = ["CSS_KEYWORDS", "NAMED_COLORS", "is_valid_css_value"]

CSS_KEYWORDS = frozenset({
    "currentcolor",
    "inherit",
    "initial",
    "unset",
    "revert",
    "transparent",
})

NAMED_COLORS = frozenset("""
aliceblue antiquewhite aqua aquamarine azure beige bisque black blanchedalmond
blue blueviolet brown burlywood cadetblue chartreuse chocolate coral
cornflowerblue cornsilk crimson cyan darkblue darkcyan darkgoldenrod darkgray
darkgreen darkgrey darkkhaki darkmagenta darkolivegreen darkorange darkorchid
darkred darksalmon darkseagreen darkslateblue darkslategray darkslategrey
darkturquoise darkviolet deeppink deepskyblue dimgray dimgrey dodgerblue
firebrick floralwhite forestgreen fuchsia gainsboro ghostwhite gold goldenrod
gray green greenyellow grey honeydew hotpink indianred indigo ivory khaki
lavender lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon
lightseagreen lightskyblue lightslategray lightslategrey lightsteelblue
lightyellow lime limegreen linen magenta maroon mediumaquamarine mediumblue
mediumorchid mediumpurple mediumseagreen mediumslateblue mediumspringgreen
mediumturquoise mediumvioletred midnightblue mintcream mistyrose moccasin
navajowhite navy oldlace olive olivedrab orange orangered orchid palegoldenrod
palegreen paleturquoise palevioletred papayawhip peachpuff peru pink plum
powderblue purple rebeccapurple red rosybrown royalblue saddlebrown salmon
sandybrown seagreen seashell sienna silver skyblue slateblue slategray
slategrey snow springgreen steelblue tan teal thistle tomato turquoise violet
wheat white whitesmoke yellow yellowgreen
""".split())

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# Color functions, with their argument list.
_COLOR_FN_RE = re.compile(
    r"^(?:rgba?|hsla?|hwb|lab|lch|oklab|oklch|color)\(.*\)$",
    re.IGNORECASE | re.DOTALL,
)


def is_valid_css_value(value: str) -> bool:
    """Return True if *value* is a color or keyword usable as-is."""
    text = value.strip()
    lowered = text.lower()
    if lowered in CSS_KEYWORDS or lowered in NAMED_COLORS:
        return True
    if lowered.startswith("var("):
        return True
    return bool(_HEX_RE.match(text) or _COLOR_FN_RE.match(text))
