"""Translation lookups for labels, hints, placeholders and stock messages."""

from __future__ import annotations

import copy
import json
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

DEFAULT_TRANSLATIONS: dict[str, Any] = {
    "simple_form": {
        "yes": "Yes",
        "no": "No",
        "required": {
            "text": "required",
            "mark": "*",
        },
        "error_notification": {
            "default_message": "Some errors were found, please take a look:",
        },
    },
    "helpers": {
        "select": {
            "prompt": "Please select",
        },
        "submit": {
            "create": "Create %{model}",
            "update": "Update %{model}",
            "submit": "Save %{model}",
        },
    },
}


_INTERPOLATION = re.compile(r"%\{(\w+)\}")


@runtime_checkable
class Translator(Protocol):
    """String lookup used when label, hint or message text is not given explicitly."""

    def translate(self, keys: str | Iterable[str], default: str | None = None, **params: Any) -> str | None:
        """Return the first key that resolves, with ``%{param}`` placeholders filled, else *default*."""
        ...


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
    return base


def _interpolate(text: str, params: Mapping[str, Any]) -> str:
    """Fill ``%{name}`` placeholders; unknown names are left as written."""
    return _INTERPOLATION.sub(lambda m: str(params[m[1]]) if m[1] in params else m[0], text)


class DictTranslator:
    """Translator backed by a nested dict of dotted keys.

    ``translations`` is merged over :data:`DEFAULT_TRANSLATIONS`, so callers
    only supply what they want to override::

        DictTranslator({"simple_form": {"labels": {"user": {"name": "Full name"}}}})
    """

    def __init__(self, translations: Mapping[str, Any] | None = None) -> None:
        self._data = _deep_merge(copy.deepcopy(DEFAULT_TRANSLATIONS), translations or {})

    @classmethod
    def from_file(cls, path: str | Path) -> DictTranslator:
        """Load translations from a JSON file."""
        data: dict[str, Any] = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(data)

    def lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    def translate(self, keys: str | Iterable[str], default: str | None = None, **params: Any) -> str | None:
        if isinstance(keys, str):
            keys = [keys]
        for key in keys:
            value = self.lookup(key)
            if isinstance(value, str):
                return _interpolate(value, params) if params else value
        return default
