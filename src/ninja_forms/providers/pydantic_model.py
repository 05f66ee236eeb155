"""Metadata provider for pydantic models used as form objects."""

from __future__ import annotations

import types
import typing
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ValidationError

from ninja_forms.errors import CollectionUnavailableError
from ninja_forms.naming import humanize
from ninja_forms.providers.base import MetadataProvider
from ninja_forms.schema import AssociationSchema, ColumnSchema, ColumnType

# Order matters: bool before int, datetime before date.
_ANNOTATION_TYPE_MAP: list[tuple[type, ColumnType]] = [
    (bool, ColumnType.BOOLEAN),
    (int, ColumnType.INTEGER),
    (float, ColumnType.FLOAT),
    (Decimal, ColumnType.DECIMAL),
    (datetime, ColumnType.DATETIME),
    (date, ColumnType.DATE),
    (time, ColumnType.TIME),
    (UUID, ColumnType.UUID),
    (bytes, ColumnType.BINARY),
    (Enum, ColumnType.ENUM),
    (str, ColumnType.STRING),
]


def _unwrap_optional(annotation: Any) -> Any:
    """``str | None`` -> ``str``; other unions are left alone."""
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _resolve_column_type(annotation: Any) -> ColumnType | None:
    annotation = _unwrap_optional(annotation)
    if typing.get_origin(annotation) is typing.Literal:
        return ColumnType.ENUM
    if not isinstance(annotation, type):
        return None
    for python_type, column_type in _ANNOTATION_TYPE_MAP:
        if issubclass(annotation, python_type):
            return column_type
    return None


def errors_from_validation_error(exc: ValidationError) -> dict[str, list[str]]:
    """Group a pydantic ValidationError's messages by top-level field name.

    Model-level errors (empty ``loc``) are filed under ``"base"``.
    """
    grouped: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        key = str(loc[0]) if loc else "base"
        grouped.setdefault(key, []).append(error["msg"])
    return grouped


class PydanticProvider(MetadataProvider):
    """Derives column metadata from pydantic field annotations and constraints.

    Pydantic models carry no associations and no error store, so validation
    messages are attached to the object they belong to, typically via
    :func:`errors_from_validation_error`::

        try:
            signup = Signup.model_validate(form_data)
        except ValidationError as exc:
            signup = Signup.model_construct(**form_data)
            provider = PydanticProvider(signup, errors_from_validation_error(exc))

    Nested records rendered with the same provider only see their own errors.
    """

    def __init__(self, obj: Any = None, errors: Mapping[str, list[str]] | None = None) -> None:
        # id -> (object, errors); the object is held so its id stays unique.
        self._errors: dict[int, tuple[Any, dict[str, list[str]]]] = {}
        if errors:
            if obj is None:
                raise ValueError("PydanticProvider errors must be attached to an object")
            self.add_errors(obj, errors)

    def add_errors(self, obj: Any, errors: Mapping[str, list[str]]) -> None:
        """Record validation *errors* for *obj*, merged with any already recorded."""
        _, stored = self._errors.setdefault(id(obj), (obj, {}))
        for key, messages in errors.items():
            stored.setdefault(key, []).extend(messages)

    def _errors_of(self, obj: Any) -> dict[str, list[str]]:
        entry = self._errors.get(id(obj))
        if entry is None or entry[0] is not obj:
            return {}
        return entry[1]

    @staticmethod
    def _fields(obj: Any) -> dict[str, Any]:
        model = obj if isinstance(obj, type) else type(obj)
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            return {}
        return model.model_fields

    def column_for(self, obj: Any, attribute_name: str) -> ColumnSchema | None:
        field = self._fields(obj).get(attribute_name)
        if field is None:
            return None
        column_type = _resolve_column_type(field.annotation)
        if column_type is None:
            return None
        limit = None
        for constraint in field.metadata:
            limit = getattr(constraint, "max_length", None) or limit
        return ColumnSchema(
            name=attribute_name,
            column_type=column_type,
            limit=limit if column_type is ColumnType.STRING else None,
            nullable=_unwrap_optional(field.annotation) is not field.annotation,
            default=None if field.is_required() else field.get_default(call_default_factory=False),
            label=field.title,
        )

    def association_for(self, obj: Any, name: str) -> AssociationSchema | None:
        return None

    def fetch_collection(self, obj: Any, association: AssociationSchema) -> list[Any]:
        raise CollectionUnavailableError(
            attribute_name=association.name,
            detail="pydantic models do not declare associations",
        )

    def errors_for(self, obj: Any, attribute_name: str) -> list[str]:
        errors = self._errors_of(obj)
        if attribute_name in errors:
            return list(errors[attribute_name])
        return super().errors_for(obj, attribute_name)

    def has_errors(self, obj: Any) -> bool:
        return any(self._errors_of(obj).values()) or super().has_errors(obj)

    def human_attribute_name(self, obj: Any, attribute_name: str) -> str:
        field = self._fields(obj).get(attribute_name)
        if field is not None and field.title:
            return field.title
        return humanize(attribute_name)

    def is_new_record(self, obj: Any) -> bool:
        return True
