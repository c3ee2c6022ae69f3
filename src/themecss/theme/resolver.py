"""Theme property resolution: map theme roles onto CSS custom properties.

A value passed to :meth:`ThemeResolver.apply` is one of:

- a :class:`CustomProperty` -> emitted through the custom property emitter;
- a theme role key (``"primary"``, ``"on-surface"``) -> emitted as the
  ``--<prefix>-<role>`` custom property with the palette value as fallback;
- anything else -> a literal ``property: value`` declaration.
"""

from __future__ import annotations

import logging
import re
from contextlib import nullcontext
from typing import Mapping

from themecss.emit.base import CustomPropertyEmitter
from themecss.emit.custom_properties import VarEmitter
from themecss.emit.feature import COLOR
from themecss.errors import InvalidStyleError, ThemeError
from themecss.model.config import ThemeConfig
from themecss.model.value import CustomProperty, ThemeValue
from themecss.stylesheet.builder import StyleBuilder
from themecss.theme.values import is_valid_css_value

__all__ = ["ThemeResolver"]

logger = logging.getLogger(__name__)


class ThemeResolver:
    """Emit theme-aware declarations into a :class:`StyleBuilder`.

    Args:
        config: Palette and custom property naming. Defaults to the
            Material palette with a ``theme`` prefix.
        emitter: Writes custom property declarations. Defaults to a
            :class:`VarEmitter` honouring ``config.emit_root_definitions``.
        feature: Feature name the emitted declarations are gated on;
            ``None`` disables gating.
    """

    def __init__(
        self,
        config: ThemeConfig | None = None,
        emitter: CustomPropertyEmitter | None = None,
        feature: str | None = COLOR,
    ) -> None:
        self.config = config or ThemeConfig()
        self.emitter = emitter or VarEmitter(
            root_definitions=self.config.emit_root_definitions
        )
        self.feature = feature

    # --- roles ----------------------------------------------------------------

    @property
    def roles(self) -> list[str]:
        return list(self.config.palette)

    def is_theme_role(self, value: object) -> bool:
        return isinstance(value, str) and value in self.config.palette

    def custom_property_for(self, role: str) -> CustomProperty:
        """Return the custom property standing for theme *role*."""
        if role not in self.config.palette:
            raise InvalidStyleError(role, self.roles)
        return CustomProperty(
            name=self.config.custom_property_name(role),
            fallback=self.config.palette[role],
        )

    # --- emission -------------------------------------------------------------

    def apply(
        self,
        builder: StyleBuilder,
        property: str,
        value: ThemeValue,
        annotations: Mapping[str, object] | None = None,
        important: bool = False,
        replace: Mapping[str, ThemeValue] | None = None,
    ) -> None:
        """Emit *property* with *value*, preferring a theme custom property."""
        with self._targets(builder):
            self._apply(builder, property, value, annotations, important, replace)

    def _targets(self, builder: StyleBuilder):
        if self.feature is None:
            return nullcontext()
        return builder.targets(self.feature)

    def _apply(
        self,
        builder: StyleBuilder,
        property: str,
        value: ThemeValue,
        annotations: Mapping[str, object] | None,
        important: bool,
        replace: Mapping[str, ThemeValue] | None,
    ) -> None:
        if isinstance(value, CustomProperty):
            self.emitter.emit(builder, property, value, annotations, important)
            return

        if self.is_theme_role(value):
            logger.debug("Resolved theme role %r for %s", value, property)
            self.emitter.emit(
                builder, property, self.custom_property_for(value), annotations, important
            )
            return

        if replace:
            self._apply_replacements(builder, property, value, replace, annotations, important)
            return

        builder.declare(property, value, important=important, annotations=annotations)

    def _apply_replacements(
        self,
        builder: StyleBuilder,
        property: str,
        value: str,
        replace: Mapping[str, ThemeValue],
        annotations: Mapping[str, object] | None,
        important: bool,
    ) -> None:
        """Substitute *replace* names in *value*: fallbacks first, then ``var()``."""
        static: dict[str, str] = {}
        dynamic: dict[str, str] = {}
        for name, replacement in replace.items():
            if self.is_theme_role(replacement):
                replacement = self.custom_property_for(replacement)
            if isinstance(replacement, CustomProperty):
                if replacement.fallback is None:
                    raise ThemeError(
                        f"Replacement '{name}' for {property} needs a fallback value",
                        property=property,
                    )
                static[name] = replacement.fallback
                dynamic[name] = replacement.var()
            else:
                static[name] = replacement
                dynamic[name] = replacement

        fallback_value = _substitute(value, static)
        var_value = _substitute(value, dynamic)
        builder.declare(property, fallback_value, important=important, annotations=annotations)
        if var_value != fallback_value:
            builder.declare(
                property,
                var_value,
                important=important,
                annotations={**(annotations or {}), "alternate": True},
            )

    def prop(
        self,
        builder: StyleBuilder,
        property: str,
        style: str,
        important: bool = False,
    ) -> None:
        """Legacy entry point: *style* must be a CSS color/keyword or a theme role.

        Raises:
            InvalidStyleError: *style* is neither; the message lists every role.
        """
        if is_valid_css_value(style):
            with self._targets(builder):
                builder.declare(property, style, important=important)
            return
        if not self.is_theme_role(style):
            raise InvalidStyleError(style, self.roles, property=property)
        self.apply(builder, property, style, important=important)


def _substitute(value: str, replacements: Mapping[str, str]) -> str:
    """Replace whole-word occurrences of each name in *value*."""
    if not replacements:
        return value
    names = sorted(replacements, key=len, reverse=True)
    pattern = re.compile(
        r"(?<![\w-])(" + "|".join(re.escape(n) for n in names) + r")(?![\w-])"
    )
    return pattern.sub(lambda m: replacements[m.group(1)], value)
