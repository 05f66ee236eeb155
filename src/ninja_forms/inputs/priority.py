"""Country and time zone selects with preferred entries listed first."""

from __future__ import annotations

import json
import logging
import zoneinfo
from functools import lru_cache
from importlib.resources import files

from markupsafe import Markup

from ninja_forms.inputs.base import Input

logger = logging.getLogger(__name__)

@lru_cache(maxsize=1)
def country_names() -> tuple[str, ...]:
    """Country names bundled with the package, alphabetical."""
    data = files("ninja_forms").joinpath("data/countries.json").read_text(encoding="utf-8")
    return tuple(json.loads(data))


@lru_cache(maxsize=1)
def time_zone_names() -> tuple[str, ...]:
    """IANA time zone names known to the interpreter, alphabetical."""
    return tuple(sorted(zoneinfo.available_timezones()))


class PriorityInput(Input):
    """Select for ``country`` and ``time_zone`` with a ``priority`` head.

    ``priority`` falls back to ``FormsConfig.country_priority`` or
    ``FormsConfig.time_zone_priority``. A ``collection`` option replaces
    the bundled choices.
    """

    def choices(self) -> list[str]:
        collection = self.options.get("collection")
        if collection is not None:
            return [str(item) for item in collection]
        if self.input_type == "time_zone":
            return list(time_zone_names())
        return list(country_names())

    def input_priority(self) -> list[str]:
        priority = self.options.get("priority")
        if priority is None and self.input_type == "time_zone":
            priority = self.config.time_zone_priority
        elif priority is None:
            priority = self.config.country_priority
        return list(priority or [])

    def input(self) -> Markup:
        choices = self.choices()
        priority = self.input_priority()
        known = set(choices)
        for entry in priority:
            if entry not in known:
                logger.warning("Priority %s %r is not among the available choices", self.input_type, entry)
        html = self.input_html_options()
        return self.builder.priority_select(
            self.attribute_name,
            [(choice, choice) for choice in choices],
            priority=[entry for entry in priority if entry in known],
            include_blank=self.options.get("include_blank", False),
            prompt=self.options.get("prompt"),
            **html,
        )
