"""Tests for the stylesheet builder and rendering."""

import pytest

from themecss.errors import ThemeError
from themecss.selector import append_selector
from themecss.stylesheet import Declaration, StyleBuilder, Stylesheet, StyleRule
from themecss.theme import ThemeResolver


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestDeclarationRender:
    def test_plain(self):
        assert Declaration("color", "red").render() == "  color: red;"

    def test_important(self):
        assert Declaration("color", "red", important=True).render() == "  color: red !important;"

    def test_annotations_become_comments(self):
        decl = Declaration("left", "0", annotations={"noflip": True, "alternate": True})
        assert decl.render() == "  /* @noflip */\n  /* @alternate */\n  left: 0;"

    def test_false_annotations_skipped(self):
        decl = Declaration("left", "0", annotations={"noflip": False})
        assert decl.render() == "  left: 0;"


class TestStylesheetRender:
    def test_empty(self):
        assert Stylesheet(root={}, rules=[]).render() == ""

    def test_root_first_then_rules(self):
        sheet = Stylesheet(
            root={"--theme-primary": "#6200ee"},
            rules=[StyleRule([".a", ".b"], [Declaration("color", "red")])],
        )
        assert sheet.render() == (
            ":root {\n"
            "  --theme-primary: #6200ee;\n"
            "}\n"
            "\n"
            ".a, .b {\n"
            "  color: red;\n"
            "}\n"
        )

    def test_rules_without_declarations_omitted(self):
        sheet = Stylesheet(root={}, rules=[StyleRule([".a"], [])])
        assert sheet.render() == ""

    def test_is_frozen(self):
        sheet = Stylesheet(root={}, rules=[])
        with pytest.raises(AttributeError):
            sheet.rules = []  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class TestStyleBuilder:
    def test_declare_outside_rule_raises(self):
        with pytest.raises(ThemeError):
            StyleBuilder().declare("color", "red")

    def test_nested_rules(self):
        builder = StyleBuilder()
        with builder.rule(".card"):
            builder.declare("color", "red")
            with builder.rule("&:hover, .icon"):
                builder.declare("color", "blue")
        rules = builder.build().rules
        assert rules[0].selectors == [".card"]
        assert rules[1].selectors == [".card:hover", ".card .icon"]
        assert rules[1].declarations == [Declaration("color", "blue")]

    def test_current_selectors(self):
        builder = StyleBuilder()
        assert builder.current_selectors == []
        with builder.rule(":host, :host button") as selectors:
            assert builder.current_selectors == selectors == [":host", ":host button"]
        assert builder.current_selectors == []

    def test_define_root_first_wins(self):
        builder = StyleBuilder()
        builder.define_root("--a", "1px")
        builder.define_root("--a", "2px")
        assert builder.build().root == {"--a": "1px"}

    def test_targets_yields_emitting_flag(self):
        builder = StyleBuilder()
        with builder.targets("color") as emitting:
            assert emitting is True


class TestHostAwareBuilder:
    def test_host_aware_is_emitted_at_root(self):
        builder = StyleBuilder()
        with builder.rule(":host([outlined]), :host, :host button"):
            hover = append_selector(builder.current_selectors, ":hover")
            with builder.host_aware(builder.current_selectors, hover):
                builder.declare("color", "red")
        rule = builder.build().rules[-1]
        assert rule.selectors == [
            ":host([outlined])",
            ":host",
            ":host button",
            ":host([outlined]:hover)",
            ":host(:hover)",
            ":host button:hover",
        ]

    def test_host_aware_with_theme_role(self):
        builder = StyleBuilder()
        with builder.rule(".ignored-parent"):
            with builder.host_aware(":host:focus"):
                ThemeResolver().apply(builder, "outline-color", "secondary")
        assert builder.render() == (
            ":root {\n"
            "  --theme-secondary: #018786;\n"
            "}\n"
            "\n"
            ":host(:focus) {\n"
            "  outline-color: #018786;\n"
            "  /* @alternate */\n"
            "  outline-color: var(--theme-secondary, #018786);\n"
            "}\n"
        )
