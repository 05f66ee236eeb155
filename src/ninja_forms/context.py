"""Per-render attribute context handed to input renderers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from ninja_forms.schema import AssociationSchema, ColumnSchema


@dataclass(frozen=True)
class AttributeContext:
    """Everything a renderer needs to know about one attribute.

    Built fresh for each render call and never stored on the builder, so
    one builder can render any number of attributes without leaking state
    between them.
    """

    object_name: str
    attribute_name: str | None
    input_type: str | None = None
    obj: Any = None
    column: ColumnSchema | None = None
    reflection: AssociationSchema | None = None
    options: dict[str, Any] = field(default_factory=dict)

    def with_options(self, **overrides: Any) -> AttributeContext:
        """Return a copy whose options are updated with *overrides*."""
        return replace(self, options={**self.options, **overrides})

    def option_html(self, namespace: str) -> dict[str, Any]:
        """Copy of the ``<namespace>_html`` override dict (empty when absent)."""
        return dict(self.options.get(f"{namespace}_html") or {})

    @property
    def reflection_or_attribute_name(self) -> str | None:
        return self.reflection.name if self.reflection is not None else self.attribute_name
