"""Input type → renderer registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ninja_forms.errors import UnknownInputTypeError
from ninja_forms.naming import camelize

if TYPE_CHECKING:
    from ninja_forms.inputs.base import Input

logger = logging.getLogger(__name__)

INPUT_CLASS_SUFFIX = "Input"


def _all_subclasses(cls: type) -> list[type]:
    found: list[type] = []
    for sub in cls.__subclasses__():
        found.append(sub)
        found.extend(_all_subclasses(sub))
    return found


class InputRegistry:
    """Maps input type tags to the :class:`Input` subclass that renders them.

    Tags missing from the mapping fall back to a naming convention: tag
    ``hidden`` resolves to a class named ``HiddenInput``, searched among
    registered classes and every loaded ``Input`` subclass.
    """

    def __init__(self, mappings: dict[str, type[Input]] | None = None) -> None:
        self._mappings: dict[str, type[Input]] = dict(mappings or {})
        self._named: dict[str, type[Input]] = {}

    def map_type(self, *input_types: str, to: type[Input]) -> None:
        """Bind each of *input_types* to renderer class *to*."""
        for input_type in input_types:
            self._mappings[input_type] = to

    def register(self, input_class: type[Input], name: str | None = None) -> None:
        """Make *input_class* resolvable by the naming convention under *name* (defaults to its class name)."""
        self._named[name or input_class.__name__] = input_class

    def copy(self) -> InputRegistry:
        clone = InputRegistry(self._mappings)
        clone._named = dict(self._named)
        return clone

    @property
    def mappings(self) -> dict[str, type[Input]]:
        return dict(self._mappings)

    def lookup(self, input_type: str) -> type[Input]:
        """Return the renderer class for *input_type*.

        Raises:
            UnknownInputTypeError: If neither the mapping nor the naming convention resolves it.
        """
        if input_type in self._mappings:
            return self._mappings[input_type]

        class_name = f"{camelize(input_type)}{INPUT_CLASS_SUFFIX}"
        if class_name in self._named:
            return self._named[class_name]

        from ninja_forms.inputs.base import Input

        for candidate in _all_subclasses(Input):
            if candidate.__name__ == class_name:
                logger.debug("Input type %r resolved by convention to %s", input_type, candidate.__qualname__)
                return candidate
        raise UnknownInputTypeError(
            attribute_name=None,
            detail=f"No input mapped for type {input_type!r} and no class named {class_name}",
        )


def default_registry() -> InputRegistry:
    """Registry with the stock input mappings."""
    from ninja_forms.inputs import (
        BooleanInput,
        CollectionInput,
        DateTimeInput,
        MappingInput,
        NumericInput,
        PriorityInput,
        StringInput,
    )

    registry = InputRegistry()
    registry.map_type("password", "text", "file", to=MappingInput)
    registry.map_type("string", "email", "search", "tel", "url", to=StringInput)
    registry.map_type("integer", "decimal", "float", to=NumericInput)
    registry.map_type("select", "radio", "check_boxes", to=CollectionInput)
    registry.map_type("date", "time", "datetime", to=DateTimeInput)
    registry.map_type("country", "time_zone", to=PriorityInput)
    registry.map_type("boolean", to=BooleanInput)
    return registry
