"""Form builder configuration loaded from .ninjastack/forms.json."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".ninjastack") / "forms.json"


class NamePattern(BaseModel):
    """Attribute-name heuristic: names matching ``pattern`` render as ``input_type``."""

    pattern: str
    input_type: str

    model_config = {"extra": "forbid"}

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as exc:
            raise ValueError(f"Invalid name pattern {v!r}: {exc}") from exc
        return v


def _default_name_patterns() -> list[NamePattern]:
    return [
        NamePattern(pattern="password", input_type="password"),
        NamePattern(pattern="time_zone", input_type="time_zone"),
        NamePattern(pattern="country", input_type="country"),
        NamePattern(pattern="email", input_type="email"),
        NamePattern(pattern="phone", input_type="tel"),
        NamePattern(pattern="url", input_type="url"),
    ]


class FormsConfig(BaseModel):
    """Top-level form builder configuration.

    Every knob has a default so an empty ``forms.json`` (or no file at all)
    yields the stock markup: ``div.input`` wrappers, ``span.hint`` hints
    and ``span.error`` errors.
    """

    components: list[Literal["label", "input", "hint", "error"]] = Field(
        default_factory=lambda: ["label", "input", "hint", "error"]
    )
    wrapper_tag: str = "div"
    wrapper_class: str = "input"
    wrapper_error_class: str = "field_with_errors"
    error_tag: str = "span"
    error_class: str = "error"
    error_method: Literal["first", "to_sentence"] = "first"
    hint_tag: str = "span"
    hint_class: str = "hint"
    error_notification_tag: str = "p"
    error_notification_class: str = "error_notification"
    form_class: str = "simple_form"
    button_class: str = "button"
    label_text_format: str = "{required} {label}"
    required_by_default: bool = True
    default_input_size: int = Field(default=50, ge=1)
    file_methods: list[str] = Field(default_factory=lambda: ["read", "filename", "path"])
    collection_label_methods: list[str] = Field(default_factory=lambda: ["to_label", "name", "title"])
    collection_value_methods: list[str] = Field(default_factory=lambda: ["id"])
    country_priority: list[str] | None = None
    time_zone_priority: list[str] | None = None
    name_patterns: list[NamePattern] = Field(default_factory=_default_name_patterns)

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> FormsConfig:
        """Load config from a JSON file, falling back to defaults."""
        p = Path(path)
        if p.exists():
            data: dict[str, Any] = json.loads(p.read_text(encoding="utf-8"))
            return cls.model_validate(data)
        logger.debug("No forms config at %s; using defaults", p)
        return cls()


def load_forms_config(project_root: str | Path | None = None) -> FormsConfig:
    """Load forms.json from the .ninjastack directory.

    The project root defaults to ``$NINJASTACK_ROOT`` or the current directory.
    """
    if project_root is None:
        project_root = Path(os.getenv("NINJASTACK_ROOT", "."))
    else:
        project_root = Path(project_root)

    return FormsConfig.from_file(project_root / DEFAULT_CONFIG_PATH)
