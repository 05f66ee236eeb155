"""Input whose control markup comes from a caller-supplied block."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from markupsafe import Markup, escape

from ninja_forms.context import AttributeContext
from ninja_forms.inputs.base import Input

if TYPE_CHECKING:
    from ninja_forms.builder import FormBuilder


class BlockInput(Input):
    """Keeps the label, hint, error and wrapper; the block renders the control."""

    def __init__(self, builder: FormBuilder, context: AttributeContext, block: Callable[[], Any]) -> None:
        super().__init__(builder, context)
        self.block = block

    def input(self) -> Markup:
        return escape(self.block())
