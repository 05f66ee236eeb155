"""Base input renderer: label, control, hint and error composed inside a wrapper."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from ninja_forms.context import AttributeContext
from ninja_forms.template import merge_classes

if TYPE_CHECKING:
    from ninja_forms.builder import FormBuilder
    from ninja_forms.config import FormsConfig
    from ninja_forms.template import FormTemplate


def to_sentence(items: list[str]) -> str:
    """``["a", "b", "c"]`` -> ``"a, b, and c"``."""
    if len(items) <= 1:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


class Input:
    """Renders one attribute.

    Subclasses implement :meth:`input` for the control itself; everything
    else (label, hint, error, wrapper, CSS classes, i18n lookups) lives
    here. Each component listed in ``FormsConfig.components`` is rendered
    in order unless its option is ``False``.
    """

    supports_placeholder = False

    def __init__(self, builder: FormBuilder, context: AttributeContext) -> None:
        self.builder = builder
        self.context = context
        self.options: dict[str, Any] = dict(context.options)

    # -- Context shortcuts --

    @property
    def config(self) -> FormsConfig:
        return self.builder.config

    @property
    def template(self) -> FormTemplate:
        return self.builder.template

    @property
    def obj(self) -> Any:
        return self.context.obj

    @property
    def attribute_name(self) -> str:
        return self.context.attribute_name or ""

    @property
    def input_type(self) -> str:
        return self.context.input_type or ""

    @property
    def column(self):
        return self.context.column

    @property
    def reflection(self):
        return self.context.reflection

    # -- Rendering --

    def input(self) -> Markup:
        raise NotImplementedError(f"{type(self).__name__} must implement input()")

    def render(self) -> Markup:
        parts: list[Any] = []
        for component in self.config.components:
            if self.options.get(component) is False:
                continue
            parts.append(getattr(self, component)())
        return self.wrap(self.template.join(parts))

    def wrap(self, content: Markup) -> Markup:
        if self.options.get("wrapper") is False:
            return content
        classes = [
            self.config.wrapper_class,
            self.input_type,
            self.required_class,
            self.config.wrapper_error_class if self.has_errors else None,
        ]
        return self.template.content_tag(self.config.wrapper_tag, content, self.html_options_for("wrapper", classes))

    def html_options_for(self, namespace: str, extra_classes: list[Any]) -> dict[str, Any]:
        """Merge ``<namespace>_html`` overrides with the component's own classes."""
        html = self.context.option_html(namespace)
        classes = merge_classes(extra_classes, html.pop("class", None), html.pop("class_", None))
        if classes:
            html["class"] = classes
        return html

    def input_html_classes(self) -> list[Any]:
        return [self.input_type, self.required_class]

    def input_html_options(self) -> dict[str, Any]:
        html = self.html_options_for("input", self.input_html_classes())
        if self.supports_placeholder and "placeholder" not in html:
            placeholder = self.placeholder_text()
            if placeholder:
                html["placeholder"] = placeholder
        return html

    # -- Required --

    @property
    def required(self) -> bool:
        value = self.options.get("required")
        return self.config.required_by_default if value is None else bool(value)

    @property
    def required_class(self) -> str:
        return "required" if self.required else "optional"

    def required_text(self) -> Markup:
        if not self.required:
            return Markup("")
        translator = self.builder.translator
        title = translator.translate("simple_form.required.text", default="required")
        mark = translator.translate("simple_form.required.mark", default="*")
        return self.template.content_tag("abbr", mark, {"title": title})

    # -- Label --

    def label(self) -> Markup:
        return self.builder.label(self.attribute_name, self.label_text(), **self.label_html_options())

    def label_text(self) -> Markup:
        text = Markup(self.config.label_text_format).format(
            required=self.required_text(),
            label=self.raw_label_text(),
        )
        return text.strip()

    def raw_label_text(self) -> str:
        label = self.options.get("label")
        if isinstance(label, str):
            return label
        name = self.context.reflection_or_attribute_name or ""
        return self.translate("labels") or self.builder.provider.human_attribute_name(self.obj, name)

    def label_html_options(self) -> dict[str, Any]:
        html = self.html_options_for("label", [self.input_type, self.required_class])
        input_id = self.context.option_html("input").get("id")
        if input_id:
            html.setdefault("for", input_id)
        return html

    # -- Hint --

    def hint(self) -> Markup | None:
        text = self.hint_text()
        if not text:
            return None
        html = self.html_options_for("hint", [self.config.hint_class])
        return self.template.content_tag(self.config.hint_tag, text, html)

    def hint_text(self) -> str | None:
        hint = self.options.get("hint")
        if isinstance(hint, str):
            return hint
        return self.translate("hints")

    # -- Placeholder --

    def placeholder_text(self) -> str | None:
        placeholder = self.options.get("placeholder")
        if isinstance(placeholder, str):
            return placeholder
        return self.translate("placeholders")

    # -- Errors --

    @cached_property
    def errors(self) -> list[str]:
        provider = self.builder.provider
        if self.obj is None:
            return []
        messages = provider.errors_for(self.obj, self.attribute_name)
        if self.reflection is not None:
            messages = messages + provider.errors_for(self.obj, self.reflection.name)
        return messages

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def error(self) -> Markup | None:
        if not self.has_errors:
            return None
        html = self.html_options_for("error", [self.config.error_class])
        return self.template.content_tag(self.config.error_tag, self.error_text(), html)

    def error_text(self) -> str:
        if self.config.error_method == "to_sentence":
            return to_sentence(self.errors)
        return self.errors[0]

    # -- I18n --

    @property
    def lookup_action(self) -> str:
        if self.obj is None or self.builder.provider.is_new_record(self.obj):
            return "new"
        return "edit"

    def translate(self, namespace: str, default: str | None = None) -> str | None:
        """Look up ``simple_form.<namespace>`` text, most specific key first."""
        name = self.context.reflection_or_attribute_name
        scope = self.builder.lookup_name
        keys = [
            f"simple_form.{namespace}.{scope}.{self.lookup_action}.{name}",
            f"simple_form.{namespace}.{scope}.{name}",
            f"simple_form.{namespace}.{name}",
        ]
        return self.builder.translator.translate(keys, default=default)
