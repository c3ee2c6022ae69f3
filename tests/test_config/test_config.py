"""Tests for theme configuration."""

import json

import pytest

from themecss.errors import ThemeError
from themecss.model import DEFAULT_PALETTE, CustomProperty, ThemeConfig, load_config


class TestThemeConfig:
    def test_defaults(self):
        config = ThemeConfig()
        assert config.palette == DEFAULT_PALETTE
        assert config.palette is not DEFAULT_PALETTE
        assert config.custom_property_name("on-primary") == "--theme-on-primary"

    def test_with_palette_maps_underscores(self):
        config = ThemeConfig().with_palette(on_primary="#111")
        assert config.palette["on-primary"] == "#111"
        assert ThemeConfig().palette["on-primary"] == "#fff"

    def test_from_mapping(self):
        config = ThemeConfig.from_mapping({"palette": {"brand": "#123456"}, "prefix": "x"})
        assert config.palette == {"brand": "#123456"}
        assert config.custom_property_name("brand") == "--x-brand"

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ThemeError, match="Unknown config keys: colour"):
            ThemeConfig.from_mapping({"colour": {}})

    def test_from_mapping_rejects_bad_palette(self):
        with pytest.raises(ThemeError):
            ThemeConfig.from_mapping({"palette": ["primary"]})

    def test_from_mapping_rejects_null_palette_value(self):
        with pytest.raises(ThemeError, match="'primary'"):
            ThemeConfig.from_mapping({"palette": {"primary": None}})

    def test_from_mapping_rejects_non_string_palette_value(self):
        with pytest.raises(ThemeError):
            ThemeConfig.from_mapping({"palette": {"primary": 42}})

    def test_from_mapping_rejects_non_string_prefix(self):
        with pytest.raises(ThemeError, match="prefix"):
            ThemeConfig.from_mapping({"prefix": None})

    def test_from_mapping_rejects_non_bool_root_flag(self):
        with pytest.raises(ThemeError, match="emit_root_definitions"):
            ThemeConfig.from_mapping({"emit_root_definitions": "false"})


class TestLoadConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"prefix": "brand", "emit_root_definitions": False}))
        config = load_config(path)
        assert config.prefix == "brand"
        assert config.emit_root_definitions is False
        assert config.palette == DEFAULT_PALETTE

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text("{not json")
        with pytest.raises(ThemeError, match="Invalid JSON"):
            load_config(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text("[]")
        with pytest.raises(ThemeError):
            load_config(path)


class TestCustomProperty:
    def test_name_gets_dashes(self):
        assert CustomProperty("x").name == "--x"
        assert CustomProperty("--x").name == "--x"

    def test_var(self):
        assert CustomProperty("x", fallback="red").var() == "var(--x, red)"
        assert str(CustomProperty("x")) == "var(--x)"
