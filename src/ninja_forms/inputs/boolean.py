"""Checkbox input for boolean attributes."""

from __future__ import annotations

from markupsafe import Markup

from ninja_forms.inputs.base import Input


class BooleanInput(Input):
    """Hidden ``0`` plus a ``1`` checkbox, so unchecked boxes still submit a value."""

    def input(self) -> Markup:
        return self.builder.check_box(self.attribute_name, **self.input_html_options())
