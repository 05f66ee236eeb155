"""Ninja Forms: metadata-driven HTML form builder."""

from __future__ import annotations

from ninja_forms.builder import FormBuilder
from ninja_forms.config import FormsConfig, NamePattern, load_forms_config
from ninja_forms.context import AttributeContext
from ninja_forms.errors import (
    AssociationNotFoundError,
    CollectionUnavailableError,
    FormError,
    MissingObjectError,
    UnknownInputTypeError,
    UnsupportedAssociationError,
)
from ninja_forms.fields import FieldBuilder
from ninja_forms.helpers import form_for
from ninja_forms.i18n import DictTranslator, Translator
from ninja_forms.inputs.base import Input
from ninja_forms.providers import MetadataProvider, ObjectProvider, PydanticProvider, SQLAlchemyProvider
from ninja_forms.registry import InputRegistry, default_registry
from ninja_forms.resolver import InputTypeResolver, Resolution
from ninja_forms.schema import AssociationMacro, AssociationSchema, ColumnSchema, ColumnType
from ninja_forms.template import FormTemplate

__all__ = [
    "AssociationMacro",
    "AssociationNotFoundError",
    "AssociationSchema",
    "AttributeContext",
    "CollectionUnavailableError",
    "ColumnSchema",
    "ColumnType",
    "DictTranslator",
    "FieldBuilder",
    "FormBuilder",
    "FormError",
    "FormTemplate",
    "FormsConfig",
    "Input",
    "InputRegistry",
    "InputTypeResolver",
    "MetadataProvider",
    "MissingObjectError",
    "NamePattern",
    "ObjectProvider",
    "PydanticProvider",
    "Resolution",
    "SQLAlchemyProvider",
    "Translator",
    "UnknownInputTypeError",
    "UnsupportedAssociationError",
    "default_registry",
    "form_for",
    "load_forms_config",
]
