"""Markup primitives: tags, selects and forms rendered through Jinja2 templates."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from jinja2 import Environment, PackageLoader
from markupsafe import Markup

VOID_ELEMENTS: frozenset[str] = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)


def _get_template_env() -> Environment:
    """Create a Jinja2 environment with autoescape enabled for HTML templates."""
    return Environment(
        loader=PackageLoader("ninja_forms", "templates"),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def html_attributes(attrs: Mapping[str, Any] | None) -> dict[str, Any]:
    """Normalize caller-supplied HTML options into renderable attributes.

    - ``class_`` style keys lose their trailing underscore.
    - ``True`` renders as a boolean attribute (``multiple="multiple"``); ``False`` and ``None`` are dropped.
    - Lists and tuples are space-joined (handy for ``class``).
    - A ``data`` mapping expands to ``data-*`` attributes.
    """
    normalized: dict[str, Any] = {}
    for raw_key, value in (attrs or {}).items():
        key = str(raw_key).rstrip("_")
        if key == "data" and isinstance(value, Mapping):
            for data_key, data_value in value.items():
                normalized.update(html_attributes({f"data-{str(data_key).replace('_', '-')}": data_value}))
            continue
        if value is None or value is False:
            continue
        if value is True:
            normalized[key] = key
        elif isinstance(value, (list, tuple)):
            joined = " ".join(str(v) for v in value if v not in (None, ""))
            if joined:
                normalized[key] = joined
        else:
            normalized[key] = value
    return normalized


def value_to_str(value: Any) -> str:
    """String form of a control value: ``True`` -> ``"true"``, enums by their value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value_to_str(value.value)
    return str(value)


def merge_classes(*classes: Any) -> str:
    """Join class fragments, skipping empties: ``merge_classes("string", None, "wide")`` -> ``"string wide"``."""
    parts: list[str] = []
    for item in classes:
        if item is None or item is False:
            continue
        if isinstance(item, (list, tuple)):
            parts.extend(str(i) for i in item if i not in (None, ""))
        elif str(item):
            parts.append(str(item))
    return " ".join(parts).strip()


@dataclass(frozen=True)
class SelectOption:
    """One ``<option>`` of a select box."""

    value: str
    label: str
    selected: bool = False
    disabled: bool = False

    def attributes(self) -> dict[str, Any]:
        return html_attributes({"value": self.value, "selected": self.selected, "disabled": self.disabled})


def options_for_select(
    choices: Iterable[tuple[Any, Any]],
    selected: Any = None,
    disabled: Iterable[Any] = (),
) -> list[SelectOption]:
    """Build options from ``(label, value)`` pairs, marking selected and disabled values.

    ``selected`` may be a single value or an iterable of values (multiple selects).
    """
    if selected is None:
        selected_values: set[str] = set()
    elif isinstance(selected, (list, tuple, set, frozenset)):
        selected_values = {value_to_str(v) for v in selected}
    else:
        selected_values = {value_to_str(selected)}
    disabled_values = {value_to_str(v) for v in disabled}
    return [
        SelectOption(
            value=value_to_str(value),
            label=str(label),
            selected=value_to_str(value) in selected_values,
            disabled=value_to_str(value) in disabled_values,
        )
        for label, value in choices
    ]


class FormTemplate:
    """Renders HTML fragments for the form builder.

    All output is :class:`markupsafe.Markup`; plain strings passed as content
    are escaped, ``Markup`` content is embedded as-is.
    """

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env or _get_template_env()

    def tag(self, name: str, attrs: Mapping[str, Any] | None = None) -> Markup:
        """Render a void element such as ``<input>``."""
        template = self._env.get_template("tag.html.j2")
        return Markup(template.render(name=name, attrs=html_attributes(attrs), void=True))

    def content_tag(self, name: str, content: Any = None, attrs: Mapping[str, Any] | None = None) -> Markup:
        """Render ``<name attrs>content</name>``; void elements ignore *content*."""
        template = self._env.get_template("tag.html.j2")
        return Markup(
            template.render(
                name=name,
                attrs=html_attributes(attrs),
                content="" if content is None else content,
                void=name in VOID_ELEMENTS,
            )
        )

    def select_tag(
        self,
        options: list[SelectOption],
        attrs: Mapping[str, Any] | None = None,
        blank: str | None = None,
    ) -> Markup:
        """Render a ``<select>``; *blank* adds a leading empty-valued option with that text."""
        template = self._env.get_template("select.html.j2")
        return Markup(template.render(attrs=html_attributes(attrs), options=options, blank=blank))

    def form_tag(self, content: Any, attrs: Mapping[str, Any] | None = None) -> Markup:
        template = self._env.get_template("form.html.j2")
        return Markup(template.render(attrs=html_attributes(attrs), content=content))

    @staticmethod
    def join(parts: Iterable[Any], separator: str = "") -> Markup:
        """Concatenate fragments, escaping plain strings and skipping empty ones."""
        return Markup(separator).join(part for part in parts if part)
