from themecss.selector.host import (
    HostSelector,
    fix_host_selector,
    host_aware,
    needs_fix,
    parse_host_selector,
)
from themecss.selector.parser import (
    ParenSpan,
    append_selector,
    find_paren_span,
    nest_selectors,
    split_selector_list,
)

__all__ = [
    "HostSelector",
    "ParenSpan",
    "append_selector",
    "find_paren_span",
    "fix_host_selector",
    "host_aware",
    "needs_fix",
    "nest_selectors",
    "parse_host_selector",
    "split_selector_list",
]
