"""Failures raised by the catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog service errors."""


class ResourceNotFoundError(CatalogServiceError):
    """Raised when the requested identity does not exist."""


class DatabaseIntegrityError(CatalogServiceError):
    """Raised when a delete is blocked by records that depend on the target."""
