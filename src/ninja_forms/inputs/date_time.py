"""HTML5 date, time and datetime-local inputs."""

from __future__ import annotations

from markupsafe import Markup

from ninja_forms.inputs.base import Input

_FIELD_HELPERS: dict[str, str] = {
    "date": "date_field",
    "time": "time_field",
    "datetime": "datetime_field",
}


class DateTimeInput(Input):
    def input(self) -> Markup:
        helper = getattr(self.builder, _FIELD_HELPERS[self.input_type])
        return helper(self.attribute_name, **self.input_html_options())
