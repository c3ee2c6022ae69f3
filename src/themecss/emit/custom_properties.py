"""Default custom property emitter: static fallback plus ``var()`` alternate."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from themecss.model.value import CustomProperty

if TYPE_CHECKING:
    from themecss.stylesheet.builder import StyleBuilder


class VarEmitter:
    """Emit ``property: fallback`` followed by ``property: var(--name, fallback)``.

    The ``var()`` declaration carries an ``@alternate`` annotation so GSS
    style compilers keep both. Without a fallback only the ``var()``
    declaration is written. With *root_definitions* the fallback is also
    recorded as ``--name: fallback`` in the root block.
    """

    def __init__(self, root_definitions: bool = True) -> None:
        self.root_definitions = root_definitions

    def emit(
        self,
        builder: StyleBuilder,
        property: str,
        custom_property: CustomProperty,
        annotations: Mapping[str, object] | None = None,
        important: bool = False,
    ) -> None:
        merged: dict[str, object] = dict(custom_property.annotations)
        if annotations:
            merged.update(annotations)

        if custom_property.fallback is None:
            builder.declare(
                property, custom_property.var(), important=important, annotations=merged
            )
            return

        if self.root_definitions:
            builder.define_root(custom_property.name, custom_property.fallback)
        builder.declare(
            property, custom_property.fallback, important=important, annotations=merged
        )
        builder.declare(
            property,
            custom_property.var(),
            important=important,
            annotations={**merged, "alternate": True},
        )
