"""Domain exceptions for the form builder.

Every failure raised while resolving or rendering an attribute is one of
these, so callers can catch :class:`FormError` without knowing which
metadata provider or renderer was involved.
"""

from __future__ import annotations


class FormError(Exception):
    """Base exception for all form-building errors.

    Attributes:
        attribute_name: The attribute (or association) being rendered, if any.
        detail: A description of what went wrong.
    """

    def __init__(self, *, attribute_name: str | None, detail: str, cause: Exception | None = None) -> None:
        self.attribute_name = attribute_name
        self.detail = detail
        msg = f"[{attribute_name}] {detail}" if attribute_name else detail
        super().__init__(msg)
        if cause is not None:
            self.__cause__ = cause


class MissingObjectError(FormError, ValueError):
    """Raised when ``association`` is used on a builder with no bound object."""


class AssociationNotFoundError(FormError, LookupError):
    """Raised when the provider has no reflection for the requested association."""


class UnsupportedAssociationError(FormError):
    """Raised for association kinds the association helper cannot render (``has_one``)."""


class UnknownInputTypeError(FormError, LookupError):
    """Raised when no renderer is mapped or named for an input type."""


class CollectionUnavailableError(FormError):
    """Raised when a provider cannot load the records for an association collection."""
