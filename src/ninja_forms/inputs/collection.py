"""Collection inputs: select boxes, radio buttons and check boxes."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from enum import Enum
from operator import itemgetter
from typing import Any

from markupsafe import Markup

from ninja_forms.inputs.base import Input

_BASIC_TYPES = (str, int, float, Decimal, bool, type(None))

LabelValueMethod = str | Callable[[Any], Any]


def _call(item: Any, method: LabelValueMethod) -> Any:
    if callable(method):
        return method(item)
    value = getattr(item, method)
    return value() if callable(value) else value


class CollectionInput(Input):
    """Renders a collection as ``select``, ``radio`` or ``check_boxes``.

    Items become ``(label, value)`` pairs. Explicit ``label_method`` and
    ``value_method`` options (attribute names or callables) win; otherwise
    mappings become their ``(key, value)`` items, pairs and lists use their
    first and last element, scalars use ``str``, and objects are probed with ``collection_label_methods`` and
    ``collection_value_methods`` from the config.
    """

    def collection(self) -> list[Any]:
        collection = self.options.get("collection")
        if collection is None:
            translator = self.builder.translator
            return [
                (translator.translate("simple_form.yes", default="Yes"), True),
                (translator.translate("simple_form.no", default="No"), False),
            ]
        if isinstance(collection, Mapping):
            return list(collection.items())
        return list(collection)

    def detect_collection_methods(self, collection: Sequence[Any]) -> tuple[LabelValueMethod, LabelValueMethod]:
        label = self.options.get("label_method")
        value = self.options.get("value_method")
        if label and value:
            return label, value
        common_label, common_value = self.detect_common_display_methods(collection)
        return label or common_label, value or common_value

    def detect_common_display_methods(self, collection: Sequence[Any]) -> tuple[LabelValueMethod, LabelValueMethod]:
        if any(isinstance(item, (list, tuple)) for item in collection):
            return itemgetter(0), itemgetter(-1)
        if all(isinstance(item, (*_BASIC_TYPES, Enum)) for item in collection):
            return _display, _display
        sample = collection[0] if collection else None
        label = next((m for m in self.config.collection_label_methods if hasattr(sample, m)), None)
        value = next((m for m in self.config.collection_value_methods if hasattr(sample, m)), None)
        return label or str, value or str

    def choices(self) -> list[tuple[Any, Any]]:
        collection = self.collection()
        label_method, value_method = self.detect_collection_methods(collection)
        return [(_call(item, label_method), _call(item, value_method)) for item in collection]

    def input(self) -> Markup:
        html = self.input_html_options()
        choices = self.choices()
        if self.input_type == "radio":
            return self.builder.collection_radio_buttons(self.attribute_name, choices, **html)
        if self.input_type == "check_boxes":
            return self.builder.collection_check_boxes(self.attribute_name, choices, **html)
        return self.builder.select(self.attribute_name, choices, **self.select_options(html), **html)

    def select_options(self, html: dict[str, Any]) -> dict[str, Any]:
        prompt = self.options.get("prompt")
        multiple = bool(html.get("multiple"))
        include_blank = self.options.get("include_blank", not (multiple or prompt))
        return {"include_blank": include_blank, "prompt": prompt}


def _display(item: Any) -> str:
    return str(item.value) if isinstance(item, Enum) else str(item)
