"""Form builder: resolves each attribute to an input type and dispatches to its renderer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from markupsafe import Markup

from ninja_forms.config import FormsConfig
from ninja_forms.context import AttributeContext
from ninja_forms.error_notification import ErrorNotification
from ninja_forms.errors import AssociationNotFoundError, MissingObjectError, UnsupportedAssociationError
from ninja_forms.fields import FieldBuilder
from ninja_forms.i18n import Translator
from ninja_forms.inputs.base import Input
from ninja_forms.inputs.block import BlockInput
from ninja_forms.naming import singularize
from ninja_forms.providers.base import MetadataProvider
from ninja_forms.registry import InputRegistry, default_registry
from ninja_forms.resolver import InputTypeResolver
from ninja_forms.schema import AssociationMacro, AssociationSchema
from ninja_forms.template import FormTemplate

logger = logging.getLogger(__name__)


def _normalize_options(options: dict[str, Any]) -> dict[str, Any]:
    """``as_`` and ``class_`` keyword spellings become ``as`` and ``class``."""
    return {key.rstrip("_"): value for key, value in options.items()}


class FormBuilder(FieldBuilder):
    """Builds labelled, hinted and wrapped inputs for one bound object.

    Example::

        builder = FormBuilder("user", user, provider=SQLAlchemyProvider(session))
        builder.input("name")
        builder.input("description", as_="text", hint="Shown on your profile")
        builder.association("company")
        builder.button("submit")

    Input types are inferred by :class:`InputTypeResolver` and rendered by
    the class the registry maps them to. Subclasses can extend the mapping
    with :meth:`map_type` without touching other builders.
    """

    registry: InputRegistry = default_registry()

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
        super().__init__(object_name, obj, template=template, provider=provider, translator=translator, config=config)
        self.resolver = InputTypeResolver(
            self.provider,
            name_patterns=self.config.name_patterns,
            file_methods=self.config.file_methods,
        )

    @classmethod
    def map_type(cls, *input_types: str, to: type[Input]) -> None:
        """Render *input_types* with *to* for this builder class and its subclasses."""
        if "registry" not in cls.__dict__:
            cls.registry = cls.registry.copy()
        cls.registry.map_type(*input_types, to=to)

    # -- Inputs --

    def attribute_context(
        self,
        attribute_name: str | None,
        options: dict[str, Any],
        reflection: AssociationSchema | None = None,
    ) -> AttributeContext:
        """Resolve *attribute_name* and freeze everything its renderer needs."""
        if attribute_name is None:
            return AttributeContext(self.object_name, None, obj=self.object, options=options)
        resolution = self.resolver.resolve(self.object, attribute_name, options)
        return AttributeContext(
            object_name=self.object_name,
            attribute_name=attribute_name,
            input_type=resolution.input_type,
            obj=self.object,
            column=resolution.column,
            reflection=reflection,
            options=resolution.options,
        )

    def input(self, attribute_name: str, block: Callable[[], Any] | None = None, **options: Any) -> Markup:
        """Render *attribute_name* with label, control, hint and error inside a wrapper.

        Options:
            as_: Force an input type (``"text"``, ``"radio"``, ...).
            collection: Choices for a select, radio or check box input.
            label, hint, placeholder: Literal text, or ``False`` to omit the part.
            error: ``False`` omits the error message.
            required: Overrides ``FormsConfig.required_by_default``.
            wrapper: ``False`` skips the wrapping element.
            input_html, label_html, hint_html, error_html, wrapper_html: Extra HTML attributes per part.

        A *block* replaces the control with whatever it returns.
        """
        return self._render_input(attribute_name, _normalize_options(options), block)

    attribute = input

    def _render_input(
        self,
        attribute_name: str,
        options: dict[str, Any],
        block: Callable[[], Any] | None = None,
        reflection: AssociationSchema | None = None,
    ) -> Markup:
        context = self.attribute_context(attribute_name, options, reflection)
        if block is not None:
            return BlockInput(self, context, block).render()
        input_class = self.registry.lookup(context.input_type or "string")
        return input_class(self, context).render()

    def association(self, association: str, block: Callable[[Any], Any] | None = None, **options: Any) -> Markup:
        """Render an input for the association *association*.

        ``belongs_to`` renders its foreign key; ``has_many`` and
        ``has_and_belongs_to_many`` render ``<singular>_ids`` as a multiple
        select. The collection defaults to every record of the target.
        With a *block*, renders nested fields for the associated record(s).

        Raises:
            MissingObjectError: If the builder has no bound object.
            AssociationNotFoundError: If the provider does not know *association*.
            UnsupportedAssociationError: For ``has_one`` associations.
        """
        options = _normalize_options(options)
        if block is not None:
            return self.simple_fields_for(association, options.pop("collection", None), block, **options)
        if self.object is None:
            raise MissingObjectError(
                attribute_name=association,
                detail="association() needs an object bound to the form builder",
            )

        options.setdefault("as", "select")
        reflection = self.provider.association_for(self.object, association)
        if reflection is None:
            raise AssociationNotFoundError(
                attribute_name=association,
                detail=f"{type(self.object).__name__} has no association named {association!r}",
            )

        if reflection.macro is AssociationMacro.BELONGS_TO:
            attribute = reflection.foreign_key or f"{reflection.name}_id"
        elif reflection.macro.is_collection:
            attribute = f"{singularize(reflection.name)}_ids"
            if options["as"] == "select":
                html = dict(options.get("input_html") or {})
                if html.get("size") is None:
                    html["size"] = 5
                html.setdefault("multiple", True)
                options["input_html"] = html
        else:
            raise UnsupportedAssociationError(
                attribute_name=association,
                detail=f"{reflection.macro.value} associations are not supported; use simple_fields_for instead",
            )

        if options.get("collection") is None:
            options["collection"] = self.provider.fetch_collection(self.object, reflection)
            logger.debug("Loaded %d choices for association %s", len(options["collection"]), association)
        return self._render_input(attribute, options, reflection=reflection)

    # -- Nesting --

    def simple_fields_for(
        self,
        record_name: str,
        record_object: Any = None,
        block: Callable[[FormBuilder], Any] | None = None,
        **options: Any,
    ) -> Markup:
        """:meth:`fields_for` with a :class:`FormBuilder` (or subclass) for the nested record.

        Options are forwarded to the nested builder; unknown ones raise ``TypeError``.
        """
        options = _normalize_options(options)
        builder = options.get("builder")
        if builder is not None and not (isinstance(builder, type) and issubclass(builder, FormBuilder)):
            raise TypeError(f"simple_fields_for() builder must be a FormBuilder subclass, got {builder!r}")
        return self.fields_for(record_name, record_object, block, **options)

    # -- Standalone parts --

    def button(self, button_type: str, *args: Any, **options: Any) -> Markup:
        """Render ``<button_type>_button`` (or ``<button_type>``) with the configured button class.

        ``button("submit", class_="primary")`` renders ``class="button primary"``.
        """
        options = _normalize_options(options)
        options["class"] = f"{self.config.button_class} {options.get('class') or ''}".strip()
        helper = getattr(self, f"{button_type}_button", None) or getattr(self, button_type)
        return helper(*args, **options)

    def error(self, attribute_name: str, **options: Any) -> Markup:
        """Render only the error message for *attribute_name*; empty when it has none."""
        options = _normalize_options(options)
        html = {"error_html": options}
        return self._part(attribute_name, html, "error")

    def hint(self, attribute_name_or_text: str, **options: Any) -> Markup:
        """Render a hint.

        An identifier such as ``"name"`` looks the hint up under
        ``simple_form.hints``; anything else is the hint text itself.
        """
        options = _normalize_options(options)
        parts: dict[str, Any] = {}
        if "hint" in options:
            parts["hint"] = options.pop("hint")
        if parts.get("hint") is False:
            return Markup("")
        if attribute_name_or_text.isidentifier():
            attribute_name: str | None = attribute_name_or_text
        else:
            attribute_name = None
            parts.setdefault("hint", attribute_name_or_text)
        parts["hint_html"] = options
        return self._part(attribute_name, parts, "hint")

    def label(self, attribute_name: str, text: Any = None, **options: Any) -> Markup:  # type: ignore[override]
        """Render a label.

        A string *text* renders a plain label. Otherwise ``label=`` and
        ``required=`` shape it like an input's label, with the required mark.
        """
        options = _normalize_options(options)
        if isinstance(text, str):
            return super().label(attribute_name, text, **options)
        parts: dict[str, Any] = {}
        for key in ("label", "required"):
            if key in options:
                parts[key] = options.pop(key)
        parts["label_html"] = options
        context = self.attribute_context(attribute_name, parts)
        return Input(self, context).label()

    def error_notification(self, **options: Any) -> Markup:
        """Render the form-level error summary; empty when the object has no errors."""
        return ErrorNotification(self, _normalize_options(options)).render()

    def _part(self, attribute_name: str | None, options: dict[str, Any], component: str) -> Markup:
        context = self.attribute_context(attribute_name, options)
        return getattr(Input(self, context), component)() or Markup("")
