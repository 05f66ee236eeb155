"""Name inflection helpers shared by the builder and providers."""

from __future__ import annotations

import re

# Ordered (pattern, replacement) rules; first match wins.
_SINGULAR_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(?i)(quiz)zes$"), r"\1"),
    (re.compile(r"(?i)(matri|vert|ind)ices$"), r"\1ix"),
    (re.compile(r"(?i)(alias|status)es$"), r"\1"),
    (re.compile(r"(?i)(octop|vir)i$"), r"\1us"),
    (re.compile(r"(?i)(cris|ax|test)es$"), r"\1is"),
    (re.compile(r"(?i)(shoe)s$"), r"\1"),
    (re.compile(r"(?i)(o)es$"), r"\1"),
    (re.compile(r"(?i)(bus)es$"), r"\1"),
    (re.compile(r"(?i)([ml])ice$"), r"\1ouse"),
    (re.compile(r"(?i)(x|ch|ss|sh)es$"), r"\1"),
    (re.compile(r"(?i)(m)ovies$"), r"\1ovie"),
    (re.compile(r"(?i)(s)eries$"), r"\1eries"),
    (re.compile(r"(?i)([^aeiouy]|qu)ies$"), r"\1y"),
    (re.compile(r"(?i)([lr])ves$"), r"\1f"),
    (re.compile(r"(?i)(tive)s$"), r"\1"),
    (re.compile(r"(?i)(hive)s$"), r"\1"),
    (re.compile(r"(?i)([^f])ves$"), r"\1fe"),
    (re.compile(r"(?i)(analy|ba|diagno|parenthe|progno|synop|the)ses$"), r"\1sis"),
    (re.compile(r"(?i)([ti])a$"), r"\1um"),
    (re.compile(r"(?i)(n)ews$"), r"\1ews"),
    (re.compile(r"(?i)(ss)$"), r"\1"),
    (re.compile(r"(?i)s$"), ""),
]

_IRREGULAR_SINGULARS: dict[str, str] = {
    "people": "person",
    "men": "man",
    "women": "woman",
    "children": "child",
    "sexes": "sex",
    "moves": "move",
}

_UNCOUNTABLE: frozenset[str] = frozenset(
    {"equipment", "information", "rice", "money", "species", "series", "fish", "sheep", "jeans", "news"}
)


def snake_case(name: str) -> str:
    """Convert PascalCase to snake_case, keeping acronyms together (``HTMLParser`` -> ``html_parser``)."""
    step = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    step = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", step)
    return step.replace("-", "_").lower()


def camelize(name: str) -> str:
    """Convert snake_case to PascalCase: ``check_boxes`` -> ``CheckBoxes``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def humanize(name: str) -> str:
    """Turn an attribute name into a label: ``company_id`` -> ``Company``."""
    text = re.sub(r"_id$", "", name).replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def singularize(word: str) -> str:
    """Return the singular form of an English plural (``categories`` -> ``category``)."""
    lowered = word.lower()
    if lowered in _UNCOUNTABLE:
        return word
    # Only the trailing segment of a compound name is inflected.
    head, sep, tail = word.rpartition("_")
    if sep:
        return f"{head}_{singularize(tail)}"
    if lowered in _IRREGULAR_SINGULARS:
        singular = _IRREGULAR_SINGULARS[lowered]
        return singular if word.islower() else singular.capitalize()
    for pattern, replacement in _SINGULAR_RULES:
        if pattern.search(word):
            return pattern.sub(replacement, word)
    return word


def sanitized_id(object_name: str, method_name: str) -> str:
    """Build a DOM id from a field's object and method names.

    ``("user[company]", "name")`` -> ``user_company_name``.
    """
    prefix = re.sub(r"\]\[|[^-a-zA-Z0-9:.]", "_", object_name).rstrip("_")
    method = re.sub(r"[^-a-zA-Z0-9:.]", "_", method_name)
    return f"{prefix}_{method}" if prefix else method
