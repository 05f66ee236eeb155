"""Field helpers bound to one object: the primitives the form builder composes.

Names, ids and values follow the ``object_name[method]`` convention::

    >>> FieldBuilder("user", user).text_field("name")
    Markup('<input type="text" name="user[name]" id="user_name" value="Carlos">')
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import date, datetime, time
from typing import Any

from markupsafe import Markup, escape

from ninja_forms.config import FormsConfig
from ninja_forms.i18n import DictTranslator, Translator
from ninja_forms.naming import humanize, sanitized_id
from ninja_forms.providers.base import MetadataProvider, ObjectProvider
from ninja_forms.template import FormTemplate, SelectOption, options_for_select, value_to_str

PRIORITY_SEPARATOR = "-------------"

_UNSET: Any = object()


def _value_suffix(value: Any) -> str:
    """Id suffix for one choice of a radio or check box group."""
    return re.sub(r"[^-\w]", "", re.sub(r"\s", "_", str(value))).lower()


def _as_values(value: Any) -> set[str]:
    if value is None:
        return set()
    if isinstance(value, (list, tuple, set, frozenset)):
        return {value_to_str(v) for v in value}
    return {value_to_str(value)}


class FieldBuilder:
    """Renders individual form controls for ``object_name`` / ``obj``."""

    def __init__(
        self,
        object_name: str,
        obj: Any = None,
        *,
        template: FormTemplate | None = None,
        provider: MetadataProvider | None = None,
        translator: Translator | None = None,
        config: FormsConfig | None = None,
    ) -> None:
        self.object_name = object_name
        self.object = obj
        self.template = template or FormTemplate()
        self.provider = provider or ObjectProvider()
        self.translator = translator or DictTranslator()
        self.config = config or FormsConfig()

    # -- Naming --

    @property
    def lookup_name(self) -> str:
        """Model key used for i18n lookups (``user`` for a ``User`` object)."""
        if self.object is not None:
            return self.provider.model_name(self.object)
        return self.object_name

    def field_name(self, method: str, multiple: bool = False) -> str:
        name = f"{self.object_name}[{method}]" if self.object_name else method
        return f"{name}[]" if multiple else name

    def field_id(self, method: str) -> str:
        return sanitized_id(self.object_name, method)

    def value(self, method: str) -> Any:
        return self.provider.value_for(self.object, method)

    # -- Controls --

    def _input(self, input_type: str, method: str, html: dict[str, Any], value: Any = _UNSET) -> Markup:
        if value is _UNSET:
            value = self.value(method)
        if value is not None:
            value = value_to_str(value)
        attrs = {"type": input_type, "name": self.field_name(method), "id": self.field_id(method), "value": value}
        attrs.update(html)
        return self.template.tag("input", attrs)

    def label(self, method: str, text: str | None = None, **html: Any) -> Markup:
        if text is None:
            text = self.provider.human_attribute_name(self.object, method)
        attrs = {"for": self.field_id(method), **html}
        return self.template.content_tag("label", text, attrs)

    def text_field(self, method: str, **html: Any) -> Markup:
        return self._input("text", method, html)

    def password_field(self, method: str, **html: Any) -> Markup:
        return self._input("password", method, html, value=None)

    def number_field(self, method: str, **html: Any) -> Markup:
        return self._input("number", method, html)

    def file_field(self, method: str, **html: Any) -> Markup:
        return self._input("file", method, html, value=None)

    def hidden_field(self, method: str, **html: Any) -> Markup:
        return self._input("hidden", method, html)

    def date_field(self, method: str, **html: Any) -> Markup:
        value = self.value(method)
        if isinstance(value, datetime):
            value = value.date()
        return self._input("date", method, html, value=value.isoformat() if isinstance(value, date) else value)

    def time_field(self, method: str, **html: Any) -> Markup:
        value = self.value(method)
        if isinstance(value, datetime):
            value = value.time()
        return self._input("time", method, html, value=value.strftime("%H:%M") if isinstance(value, time) else value)

    def datetime_field(self, method: str, **html: Any) -> Markup:
        value = self.value(method)
        if isinstance(value, datetime):
            value = value.strftime("%Y-%m-%dT%H:%M")
        elif isinstance(value, date):
            value = f"{value.isoformat()}T00:00"
        return self._input("datetime-local", method, html, value=value)

    def text_area(self, method: str, **html: Any) -> Markup:
        value = self.value(method)
        attrs = {"name": self.field_name(method), "id": self.field_id(method), **html}
        return self.template.content_tag("textarea", "" if value is None else value_to_str(value), attrs)

    def check_box(self, method: str, checked_value: str = "1", unchecked_value: str = "0", **html: Any) -> Markup:
        checked = html.pop("checked", None)
        if checked is None:
            value = self.value(method)
            checked = value is True or (value not in (None, False) and str(value) == checked_value)
        hidden = self.template.tag(
            "input", {"name": self.field_name(method), "type": "hidden", "value": unchecked_value}
        )
        box = self._input("checkbox", method, {"checked": checked, **html}, value=checked_value)
        return self.template.join([hidden, box])

    def radio_button(self, method: str, tag_value: Any, **html: Any) -> Markup:
        attrs = {
            "id": f"{self.field_id(method)}_{_value_suffix(tag_value)}",
            "checked": value_to_str(tag_value) in _as_values(self.value(method)),
            **html,
        }
        return self._input("radio", method, attrs, value=tag_value)

    # -- Selections --

    def _blank_option(self, include_blank: Any, prompt: Any) -> str | None:
        if prompt:
            if isinstance(prompt, str):
                return prompt
            return self.translator.translate("helpers.select.prompt", default="Please select")
        if include_blank:
            return include_blank if isinstance(include_blank, str) else ""
        return None

    def select(
        self,
        method: str,
        choices: Iterable[tuple[Any, Any]],
        *,
        include_blank: Any = False,
        prompt: Any = None,
        **html: Any,
    ) -> Markup:
        """Render a select box from ``(label, value)`` pairs; ``multiple=True`` submits a list."""
        attrs = {"name": self.field_name(method, bool(html.get("multiple"))), "id": self.field_id(method), **html}
        options = options_for_select(choices, selected=_as_values(self.value(method)))
        return self.template.select_tag(options, attrs, blank=self._blank_option(include_blank, prompt))

    def priority_select(
        self,
        method: str,
        choices: Iterable[tuple[Any, Any]],
        *,
        priority: Iterable[Any] = (),
        include_blank: Any = False,
        prompt: Any = None,
        **html: Any,
    ) -> Markup:
        """Select box listing *priority* values first, then a disabled separator, then the rest."""
        choices = list(choices)
        preferred = {value_to_str(p) for p in priority}
        selected = _as_values(self.value(method))
        head = options_for_select([c for c in choices if value_to_str(c[1]) in preferred], selected=selected)
        tail = options_for_select([c for c in choices if value_to_str(c[1]) not in preferred], selected=selected)
        options: list[SelectOption] = head
        if head:
            options = head + [SelectOption(value="", label=PRIORITY_SEPARATOR, disabled=True)]
        attrs = {"name": self.field_name(method), "id": self.field_id(method), **html}
        return self.template.select_tag(options + tail, attrs, blank=self._blank_option(include_blank, prompt))

    def collection_radio_buttons(self, method: str, choices: Iterable[tuple[Any, Any]], **html: Any) -> Markup:
        html.pop("id", None)
        parts: list[Markup] = []
        for label, value in choices:
            button_id = f"{self.field_id(method)}_{_value_suffix(value)}"
            parts.append(self.radio_button(method, value, **html))
            parts.append(self.template.content_tag("label", label, {"for": button_id, "class": "collection_radio"}))
        return self.template.join(parts)

    def collection_check_boxes(self, method: str, choices: Iterable[tuple[Any, Any]], **html: Any) -> Markup:
        html.pop("id", None)
        current = _as_values(self.value(method))
        name = self.field_name(method, multiple=True)
        parts: list[Markup] = []
        for label, value in choices:
            box_id = f"{self.field_id(method)}_{_value_suffix(value)}"
            attrs = {"name": name, "id": box_id, "checked": value_to_str(value) in current, **html}
            parts.append(self._input("checkbox", method, attrs, value=value))
            parts.append(
                self.template.content_tag("label", label, {"for": box_id, "class": "collection_check_boxes"})
            )
        parts.append(self.template.tag("input", {"name": name, "type": "hidden", "value": ""}))
        return self.template.join(parts)

    # -- Buttons --

    def submit_default_value(self) -> str:
        """``Create User`` for new records, ``Update User`` for persisted ones."""
        if self.object is None:
            key, model = "submit", humanize(self.object_name)
        else:
            key = "create" if self.provider.is_new_record(self.object) else "update"
            model = humanize(self.provider.model_name(self.object))
        keys = [f"helpers.submit.{self.lookup_name}.{key}", f"helpers.submit.{key}"]
        return self.translator.translate(keys, default=f"{key.capitalize()} {model}", model=model) or model

    def submit(self, value: str | None = None, **html: Any) -> Markup:
        attrs = {"type": "submit", "name": "commit", "value": value or self.submit_default_value(), **html}
        return self.template.tag("input", attrs)

    # -- Nesting --

    def fields_for(
        self,
        record_name: str,
        record_object: Any = None,
        block: Callable[[FieldBuilder], Any] | None = None,
        **builder_options: Any,
    ) -> Markup:
        """Render *block* with a builder scoped to ``object_name[record_name]``.

        Sequences render once per item, indexed ``object_name[record_name][i]``.
        *builder_options* (``builder``, ``provider``, ``translator``, ``config``,
        ``template``) override what the nested builder inherits from this one.
        """
        if block is None:
            raise TypeError("fields_for() requires a block")
        if record_object is None and self.object is not None:
            record_object = self.provider.value_for(self.object, record_name)
        child_name = f"{self.object_name}[{record_name}]"
        if isinstance(record_object, (list, tuple)):
            return self.template.join(
                escape(block(self.nested_builder(f"{child_name}[{index}]", item, **builder_options)))
                for index, item in enumerate(record_object)
            )
        return escape(block(self.nested_builder(child_name, record_object, **builder_options)))

    def nested_builder(
        self,
        object_name: str,
        obj: Any,
        builder: type[FieldBuilder] | None = None,
        **overrides: Any,
    ) -> FieldBuilder:
        inherited = {
            "template": self.template,
            "provider": self.provider,
            "translator": self.translator,
            "config": self.config,
        }
        return (builder or type(self))(object_name, obj, **{**inherited, **overrides})
