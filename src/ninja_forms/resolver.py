"""Input type inference: picks a renderer tag from options, column metadata and naming heuristics."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ninja_forms.config import NamePattern
from ninja_forms.providers.base import MetadataProvider
from ninja_forms.schema import ColumnSchema, ColumnType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one attribute."""

    input_type: str
    options: dict[str, Any]
    column: ColumnSchema | None


class InputTypeResolver:
    """Decides which input type renders an attribute.

    Priority, first match wins:

    1. an explicit ``as`` option;
    2. ``select`` when a ``collection`` is given;
    3. the column type, where ``timestamp`` becomes ``datetime`` and
       ``string`` (or no column at all) goes through the name patterns,
       then the column type, then file detection, then ``string``.
    """

    def __init__(
        self,
        provider: MetadataProvider,
        *,
        name_patterns: Iterable[NamePattern] = (),
        file_methods: Iterable[str] = (),
    ) -> None:
        self._provider = provider
        self._patterns = [(re.compile(p.pattern), p.input_type) for p in name_patterns]
        self._file_methods = tuple(file_methods)

    def resolve(self, obj: Any, attribute_name: str, options: Mapping[str, Any]) -> Resolution:
        """Resolve *attribute_name* on *obj* into an input type and effective options."""
        effective = dict(options)
        column = self._provider.column_for(obj, attribute_name) if obj is not None else None
        input_type = self.default_input_type(obj, attribute_name, column, effective)
        logger.debug("Resolved %s to input type %r", attribute_name, input_type)
        return Resolution(input_type=input_type, options=effective, column=column)

    def default_input_type(
        self,
        obj: Any,
        attribute_name: str,
        column: ColumnSchema | None,
        options: Mapping[str, Any],
    ) -> str:
        explicit = options.get("as")
        if explicit:
            return explicit.value if hasattr(explicit, "value") else str(explicit)
        if options.get("collection") is not None:
            return "select"

        column_type = column.column_type if column is not None else None
        if column_type is ColumnType.TIMESTAMP:
            return "datetime"
        if column_type is None or column_type is ColumnType.STRING:
            match = self.match_name(attribute_name)
            if match:
                return match
            if column_type is not None:
                return column_type.value
            return "file" if self.is_file(obj, attribute_name) else "string"
        return column_type.value

    def match_name(self, attribute_name: str) -> str | None:
        """Return the input type of the first name pattern matching *attribute_name*."""
        for pattern, input_type in self._patterns:
            if pattern.search(attribute_name):
                return input_type
        return None

    def is_file(self, obj: Any, attribute_name: str) -> bool:
        """Whether the attribute's current value looks like an uploaded file."""
        if obj is None or not self._file_methods:
            return False
        value = self._provider.value_for(obj, attribute_name)
        return value is not None and any(hasattr(value, m) for m in self._file_methods)
