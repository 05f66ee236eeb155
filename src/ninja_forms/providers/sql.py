"""SQLAlchemy metadata provider for ORM-mapped objects."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import inspect, select
from sqlalchemy.exc import NoInspectionAvailable, SQLAlchemyError
from sqlalchemy.orm import Mapper, RelationshipDirection, RelationshipProperty, Session, object_session

from ninja_forms.errors import CollectionUnavailableError
from ninja_forms.naming import humanize, singularize
from ninja_forms.providers.base import MetadataProvider
from ninja_forms.schema import AssociationMacro, AssociationSchema, ColumnSchema, ColumnType

logger = logging.getLogger(__name__)

# Map SQLAlchemy type class names (walked along the MRO) to ColumnType
_SQL_TYPE_MAP: dict[str, ColumnType] = {
    "INTEGER": ColumnType.INTEGER,
    "SMALLINTEGER": ColumnType.INTEGER,
    "BIGINTEGER": ColumnType.INTEGER,
    "SMALLINT": ColumnType.INTEGER,
    "BIGINT": ColumnType.INTEGER,
    "FLOAT": ColumnType.FLOAT,
    "REAL": ColumnType.FLOAT,
    "DOUBLE": ColumnType.FLOAT,
    "DOUBLE_PRECISION": ColumnType.FLOAT,
    "NUMERIC": ColumnType.DECIMAL,
    "DECIMAL": ColumnType.DECIMAL,
    "STRING": ColumnType.STRING,
    "VARCHAR": ColumnType.STRING,
    "NVARCHAR": ColumnType.STRING,
    "CHAR": ColumnType.STRING,
    "TEXT": ColumnType.TEXT,
    "UNICODETEXT": ColumnType.TEXT,
    "BOOLEAN": ColumnType.BOOLEAN,
    "TIMESTAMP": ColumnType.TIMESTAMP,
    "DATETIME": ColumnType.DATETIME,
    "DATE": ColumnType.DATE,
    "TIME": ColumnType.TIME,
    "UUID": ColumnType.UUID,
    "JSON": ColumnType.JSON,
    "JSONB": ColumnType.JSON,
    "ENUM": ColumnType.ENUM,
    "LARGEBINARY": ColumnType.BINARY,
    "BLOB": ColumnType.BINARY,
    "BYTEA": ColumnType.BINARY,
}

_TEXT_TYPES = (ColumnType.STRING, ColumnType.TEXT)


def _resolve_column_type(sa_type: object) -> ColumnType:
    """Map a SQLAlchemy column type to a ColumnType.

    Types are matched on the most specific class first, so ``TIMESTAMP``
    wins over its ``DateTime`` base and ``Unicode`` falls through to ``String``.
    """
    for klass in type(sa_type).__mro__:
        column_type = _SQL_TYPE_MAP.get(klass.__name__.upper())
        if column_type is not None:
            return column_type
    return ColumnType.STRING


def _macro_for(relationship: RelationshipProperty[Any]) -> AssociationMacro:
    if relationship.direction is RelationshipDirection.MANYTOONE:
        return AssociationMacro.BELONGS_TO
    if relationship.direction is RelationshipDirection.MANYTOMANY:
        return AssociationMacro.HAS_AND_BELONGS_TO_MANY
    return AssociationMacro.HAS_MANY if relationship.uselist else AssociationMacro.HAS_ONE


class SQLAlchemyProvider(MetadataProvider):
    """Reads column and relationship metadata from SQLAlchemy mappers.

    Collections are loaded through *session* when given, otherwise through
    the session the bound object is attached to. Relationships may declare
    collection filters via ``info={"conditions": {...}}``; ordering comes
    from the relationship's own ``order_by``.
    """

    def __init__(self, session: Session | None = None) -> None:
        self._session = session

    @staticmethod
    def _mapper(obj: Any) -> Mapper[Any] | None:
        if obj is None:
            return None
        try:
            return inspect(type(obj))
        except NoInspectionAvailable:
            return None

    def column_for(self, obj: Any, attribute_name: str) -> ColumnSchema | None:
        mapper = self._mapper(obj)
        if mapper is None or attribute_name not in mapper.column_attrs:
            return None
        column = mapper.column_attrs[attribute_name].columns[0]
        column_type = _resolve_column_type(column.type)
        limit = getattr(column.type, "length", None) if column_type in _TEXT_TYPES else None
        default = getattr(column.default, "arg", None)
        return ColumnSchema(
            name=attribute_name,
            column_type=column_type,
            limit=limit,
            nullable=bool(column.nullable),
            default=None if callable(default) else default,
            label=column.info.get("label"),
        )

    def association_for(self, obj: Any, name: str) -> AssociationSchema | None:
        mapper = self._mapper(obj)
        if mapper is None or name not in mapper.relationships:
            return None
        relationship = mapper.relationships[name]
        macro = _macro_for(relationship)
        foreign_key = None
        if macro is AssociationMacro.BELONGS_TO:
            local = sorted(relationship.local_columns, key=lambda c: c.name)
            if local:
                foreign_key = mapper.get_property_by_column(local[0]).key
        order_by = list(relationship.order_by) if relationship.order_by else []
        return AssociationSchema(
            name=name,
            macro=macro,
            target=relationship.mapper.class_,
            foreign_key=foreign_key,
            conditions=dict(relationship.info.get("conditions", {})),
            order_by=order_by,
        )

    def fetch_collection(self, obj: Any, association: AssociationSchema) -> list[Any]:
        session = self._session or object_session(obj)
        if session is None:
            raise CollectionUnavailableError(
                attribute_name=association.name,
                detail="no session available to load the association collection",
            )
        stmt = select(association.target)
        if association.conditions:
            stmt = stmt.filter_by(**association.conditions)
        if association.order_by:
            stmt = stmt.order_by(*association.order_by)
        try:
            return list(session.scalars(stmt))
        except SQLAlchemyError as exc:
            raise CollectionUnavailableError(
                attribute_name=association.name,
                detail=f"query for {association.target.__name__} failed",
                cause=exc,
            ) from exc

    def value_for(self, obj: Any, attribute_name: str) -> Any:
        """Resolve ``<singular>_ids`` to the primary keys of a collection relationship."""
        mapper = self._mapper(obj)
        if mapper is not None and attribute_name.endswith("_ids") and not hasattr(obj, attribute_name):
            stem = attribute_name[: -len("_ids")]
            for relationship in mapper.relationships:
                if relationship.uselist and singularize(relationship.key) == stem:
                    target = relationship.mapper
                    pk_key = target.get_property_by_column(target.primary_key[0]).key
                    return [getattr(child, pk_key) for child in getattr(obj, relationship.key)]
        return super().value_for(obj, attribute_name)

    def human_attribute_name(self, obj: Any, attribute_name: str) -> str:
        column = self.column_for(obj, attribute_name)
        if column is not None and column.label:
            return column.label
        return humanize(attribute_name)

    def is_new_record(self, obj: Any) -> bool:
        try:
            state = inspect(obj)
        except NoInspectionAvailable:
            return super().is_new_record(obj)
        return bool(state.transient or state.pending)
