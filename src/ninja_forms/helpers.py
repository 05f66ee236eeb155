"""``form_for``: wraps builder output in a ``<form>`` element."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from markupsafe import Markup, escape

from ninja_forms.builder import FormBuilder
from ninja_forms.template import merge_classes

_BROWSER_METHODS = frozenset({"get", "post"})


def form_for(
    obj: Any,
    block: Callable[[FormBuilder], Any],
    *,
    url: str | None = None,
    method: str = "post",
    object_name: str | None = None,
    builder_class: type[FormBuilder] = FormBuilder,
    html: dict[str, Any] | None = None,
    **builder_options: Any,
) -> Markup:
    """Render a form for *obj*, passing the builder to *block*.

    The form gets ``class="simple_form <object_name>"``, ``novalidate`` and
    an id of ``new_<object_name>`` or ``edit_<object_name>_<id>``. Methods
    other than GET and POST are tunnelled through a hidden ``_method`` field.
    *builder_options* (``provider``, ``translator``, ``config``, ``template``)
    go to the builder.

    Example::

        form_for(user, lambda f: f.input("name") + f.button("submit"), url="/users")
    """
    builder = builder_class(object_name or "", obj, **builder_options)
    if object_name is None:
        builder.object_name = builder.lookup_name if obj is not None else ""
    name = builder.object_name

    attrs: dict[str, Any] = dict(html or {})
    attrs["class"] = merge_classes(builder.config.form_class, name, attrs.pop("class", None))
    attrs.setdefault("id", _form_id(builder, name))
    attrs.setdefault("novalidate", True)
    if url is not None:
        attrs.setdefault("action", url)

    verb = method.lower()
    attrs["method"] = verb if verb in _BROWSER_METHODS else "post"
    content = escape(block(builder))
    if verb not in _BROWSER_METHODS:
        tunnel = builder.template.tag("input", {"type": "hidden", "name": "_method", "value": verb})
        content = builder.template.join([tunnel, content], "\n")
    return builder.template.form_tag(content, attrs)


def _form_id(builder: FormBuilder, name: str) -> str | None:
    if not name:
        return None
    obj = builder.object
    if obj is None or builder.provider.is_new_record(obj):
        return f"new_{name}"
    record_id = builder.provider.value_for(obj, "id")
    return f"edit_{name}" if record_id is None else f"edit_{name}_{record_id}"
