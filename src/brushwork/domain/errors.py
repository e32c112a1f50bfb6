"""Domain-level error taxonomy."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog failures surfaced to callers."""


class InvalidRequestError(CatalogError, ValueError):
    """Raised when a filter request violates a constraint before any storage access."""


class StorageError(CatalogError):
    """Raised when the persistence layer fails; the enclosing batch or request is aborted."""
