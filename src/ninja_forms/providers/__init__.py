"""Metadata providers: column, association and error lookups for bound objects."""

from ninja_forms.providers.base import MetadataProvider, ObjectProvider
from ninja_forms.providers.pydantic_model import PydanticProvider, errors_from_validation_error
from ninja_forms.providers.sql import SQLAlchemyProvider

__all__ = [
    "MetadataProvider",
    "ObjectProvider",
    "PydanticProvider",
    "SQLAlchemyProvider",
    "errors_from_validation_error",
]
