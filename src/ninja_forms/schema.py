"""Column and association metadata models handed out by metadata providers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ColumnType(str, Enum):
    """Storage-level type of a model attribute."""

    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    UUID = "uuid"
    JSON = "json"
    ENUM = "enum"


class AssociationMacro(str, Enum):
    """Kind of association between two model types."""

    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"

    @property
    def is_collection(self) -> bool:
        return self in (AssociationMacro.HAS_MANY, AssociationMacro.HAS_AND_BELONGS_TO_MANY)


class ColumnSchema(BaseModel):
    """Metadata for a single column backing a form attribute."""

    name: str = Field(min_length=1, description="Attribute name.")
    column_type: ColumnType = Field(description="Storage type of the column.")
    limit: int | None = Field(default=None, ge=1, description="Maximum length for string-like columns.")
    nullable: bool = Field(default=True, description="Whether the column accepts null values.")
    default: Any = Field(default=None, description="Column default value.")
    label: str | None = Field(default=None, description="Human label declared on the model, if any.")

    model_config = {"extra": "forbid"}


class AssociationSchema(BaseModel):
    """Reflection metadata for an association declared on a model."""

    name: str = Field(min_length=1, description="Association name.")
    macro: AssociationMacro = Field(description="Kind of association.")
    target: Any = Field(description="Target model class.")
    foreign_key: str | None = Field(default=None, description="FK attribute on the owner (belongs_to only).")
    conditions: dict[str, Any] = Field(default_factory=dict, description="Equality filters for the collection.")
    order_by: list[Any] = Field(default_factory=list, description="Ordering applied to the collection.")

    model_config = {"extra": "forbid", "arbitrary_types_allowed": True}

    @model_validator(mode="after")
    def validate_foreign_key(self) -> AssociationSchema:
        """Only ``belongs_to`` associations carry a foreign key on the owner."""
        if self.foreign_key is not None and self.macro != AssociationMacro.BELONGS_TO:
            raise ValueError(f"Association '{self.name}' sets foreign_key but is {self.macro.value}, not belongs_to")
        return self
