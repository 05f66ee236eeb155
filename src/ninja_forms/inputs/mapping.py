"""Inputs that map one-to-one onto a field helper: password, text and file."""

from __future__ import annotations

from markupsafe import Markup

from ninja_forms.inputs.base import Input

_FIELD_HELPERS: dict[str, str] = {
    "password": "password_field",
    "text": "text_area",
    "file": "file_field",
}


class MappingInput(Input):
    """Delegates to the field helper registered for the input type."""

    @property
    def supports_placeholder(self) -> bool:  # type: ignore[override]
        return self.input_type in ("password", "text")

    def input(self) -> Markup:
        helper = getattr(self.builder, _FIELD_HELPERS[self.input_type])
        return helper(self.attribute_name, **self.input_html_options())
