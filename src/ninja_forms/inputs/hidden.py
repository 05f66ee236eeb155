"""Hidden field input, resolved by naming convention rather than the type mapping."""

from __future__ import annotations

from markupsafe import Markup

from ninja_forms.inputs.base import Input


class HiddenInput(Input):
    """Renders only the hidden field, without label, hint, error or wrapper."""

    def input_html_classes(self) -> list[str]:
        return ["hidden"]

    def render(self) -> Markup:
        return self.input()

    def input(self) -> Markup:
        return self.builder.hidden_field(self.attribute_name, **self.input_html_options())
