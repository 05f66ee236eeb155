"""Form-level error summary shown above the inputs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from ninja_forms.template import merge_classes

if TYPE_CHECKING:
    from ninja_forms.builder import FormBuilder


class ErrorNotification:
    """Renders ``<p class="error_notification">`` when the bound object has errors.

    The message is ``message=`` when given, otherwise
    ``simple_form.error_notification.<model>`` or the stock default message.
    Remaining options become HTML attributes.
    """

    def __init__(self, builder: FormBuilder, options: dict[str, Any]) -> None:
        self.builder = builder
        self.options = dict(options)
        self.message = self.options.pop("message", None)

    @property
    def has_errors(self) -> bool:
        obj = self.builder.object
        return obj is not None and self.builder.provider.has_errors(obj)

    def error_message(self) -> str:
        if self.message:
            return self.message
        keys = [
            f"simple_form.error_notification.{self.builder.lookup_name}",
            "simple_form.error_notification.default_message",
        ]
        return self.builder.translator.translate(keys, default="") or ""

    def html_options(self) -> dict[str, Any]:
        config = self.builder.config
        html = dict(self.options)
        html["class"] = merge_classes(config.error_notification_class, html.pop("class", None))
        return html

    def render(self) -> Markup:
        if not self.has_errors:
            return Markup("")
        config = self.builder.config
        return self.builder.template.content_tag(
            config.error_notification_tag, self.error_message(), self.html_options()
        )
