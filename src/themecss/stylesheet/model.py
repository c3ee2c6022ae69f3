"""Stylesheet model: Declaration, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

from themecss.model.value import render_annotations

INDENT = "  "


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair with optional GSS annotations."""

    property: str
    value: str
    important: bool = False
    annotations: dict[str, object] = field(default_factory=dict)

    def render(self, indent: str = INDENT) -> str:
        lines = [f"{indent}/* {a} */" for a in render_annotations(self.annotations)]
        suffix = " !important" if self.important else ""
        lines.append(f"{indent}{self.property}: {self.value}{suffix};")
        return "\n".join(lines)


@dataclass(frozen=True)
class StyleRule:
    """A selector list paired with its declarations."""

    selectors: list[str]
    declarations: list[Declaration]

    def render(self) -> str:
        body = "\n".join(d.render() for d in self.declarations)
        return f"{', '.join(self.selectors)} {{\n{body}\n}}"


@dataclass(frozen=True)
class Stylesheet:
    """Rendered output: root custom property definitions, then rules in order."""

    root: dict[str, str]
    rules: list[StyleRule]

    def render(self) -> str:
        blocks: list[str] = []
        if self.root:
            root_rule = StyleRule(
                selectors=[":root"],
                declarations=[Declaration(k, v) for k, v in self.root.items()],
            )
            blocks.append(root_rule.render())
        blocks.extend(rule.render() for rule in self.rules if rule.declarations)
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def __str__(self) -> str:
        return self.render()
