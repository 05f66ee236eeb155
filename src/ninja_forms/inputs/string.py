"""Text-like inputs: string, email, search, tel and url."""

from __future__ import annotations

from markupsafe import Markup

from ninja_forms.inputs.base import Input


class StringInput(Input):
    """Single-line text field sized from the column limit."""

    supports_placeholder = True

    def input(self) -> Markup:
        html = self.input_html_options()
        if self.input_type != "string":
            html.setdefault("type", self.input_type)
        limit = self.column.limit if self.column is not None else None
        default_size = self.config.default_input_size
        html.setdefault("size", min(limit, default_size) if limit else default_size)
        if limit:
            html.setdefault("maxlength", limit)
        return self.builder.text_field(self.attribute_name, **html)
