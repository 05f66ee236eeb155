"""Abstract base for model metadata providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ninja_forms.errors import CollectionUnavailableError
from ninja_forms.naming import humanize, snake_case
from ninja_forms.schema import AssociationSchema, ColumnSchema


class MetadataProvider(ABC):
    """Protocol for model metadata providers.

    A provider answers the questions the form builder asks about a bound
    object: which column backs an attribute, which association a name
    refers to, which records an association may point at, and which
    validation errors the object currently holds.
    """

    @abstractmethod
    def column_for(self, obj: Any, attribute_name: str) -> ColumnSchema | None:
        """Return column metadata for *attribute_name*, or ``None`` when the attribute has no column."""

    @abstractmethod
    def association_for(self, obj: Any, name: str) -> AssociationSchema | None:
        """Return reflection metadata for association *name*, or ``None`` when unknown."""

    @abstractmethod
    def fetch_collection(self, obj: Any, association: AssociationSchema) -> list[Any]:
        """Load every record of the association target, filtered and ordered per the reflection.

        Raises:
            CollectionUnavailableError: If the records cannot be loaded.
        """

    def value_for(self, obj: Any, attribute_name: str) -> Any:
        """Current value of *attribute_name* on *obj*."""
        if obj is None:
            return None
        if isinstance(obj, Mapping):
            return obj.get(attribute_name)
        return getattr(obj, attribute_name, None)

    def errors_for(self, obj: Any, attribute_name: str) -> list[str]:
        """Validation messages recorded for *attribute_name*, read from ``obj.errors``."""
        errors = getattr(obj, "errors", None)
        if not isinstance(errors, Mapping):
            return []
        messages = errors.get(attribute_name) or []
        if isinstance(messages, str):
            return [messages]
        return [str(m) for m in messages]

    def has_errors(self, obj: Any) -> bool:
        """Whether *obj* holds any validation error at all."""
        errors = getattr(obj, "errors", None)
        if not isinstance(errors, Mapping):
            return False
        return any(errors.values())

    def human_attribute_name(self, obj: Any, attribute_name: str) -> str:
        return humanize(attribute_name)

    def is_new_record(self, obj: Any) -> bool:
        """Whether *obj* has not been persisted yet (drives ``new``/``edit`` lookups)."""
        return getattr(obj, "id", None) is None

    def model_name(self, obj: Any) -> str:
        """Param key for *obj*: ``BlogPost`` instances are named ``blog_post``."""
        return snake_case(type(obj).__name__)


class ObjectProvider(MetadataProvider):
    """Duck-typed provider for plain objects.

    Objects may opt in to metadata by defining ``column_for_attribute(name)``
    (returning a :class:`ColumnSchema` or a mapping of its fields) and a
    ``reflect_on_association(name)`` classmethod. Association targets load
    their collection through ``all(conditions=..., order_by=...)``.
    """

    def column_for(self, obj: Any, attribute_name: str) -> ColumnSchema | None:
        finder = getattr(obj, "column_for_attribute", None)
        if obj is None or not callable(finder):
            return None
        column = finder(attribute_name)
        if column is None or isinstance(column, ColumnSchema):
            return column
        return ColumnSchema.model_validate({"name": attribute_name, **column})

    def association_for(self, obj: Any, name: str) -> AssociationSchema | None:
        reflect = getattr(type(obj), "reflect_on_association", None)
        if obj is None or not callable(reflect):
            return None
        reflection = reflect(name)
        if reflection is None or isinstance(reflection, AssociationSchema):
            return reflection
        return AssociationSchema.model_validate({"name": name, **reflection})

    def fetch_collection(self, obj: Any, association: AssociationSchema) -> list[Any]:
        loader = getattr(association.target, "all", None)
        if not callable(loader):
            raise CollectionUnavailableError(
                attribute_name=association.name,
                detail=f"target {association.target!r} does not define all()",
            )
        return list(loader(conditions=dict(association.conditions), order_by=list(association.order_by)))
