"""Number inputs for integer, decimal and float attributes."""

from __future__ import annotations

from markupsafe import Markup

from ninja_forms.inputs.base import Input


class NumericInput(Input):
    supports_placeholder = True

    def input(self) -> Markup:
        html = self.input_html_options()
        html.setdefault("step", "1" if self.input_type == "integer" else "any")
        return self.builder.number_field(self.attribute_name, **html)
