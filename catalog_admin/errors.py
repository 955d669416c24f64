"""Failure taxonomy for catalog data access.

Every failure is terminal for the call that raised it. Stores translate
backend errors into these types; repositories attach the operation context
and log before re-raising.
"""

from typing import Any, Optional


class CatalogError(Exception):
    """Base class for data-access failures."""

    def __init__(
        self,
        detail: str,
        *,
        operation: Optional[str] = None,
        resource: Optional[str] = None,
        record_id: Any = None,
        code: Optional[str] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.operation = operation
        self.resource = resource
        self.record_id = record_id
        self.code = code

    def bind(self, operation: str, resource: str, record_id: Any = None) -> "CatalogError":
        """Attaches call context, keeping anything already set."""
        self.operation = self.operation or operation
        self.resource = self.resource or resource
        if self.record_id is None:
            self.record_id = record_id
        return self

    def __str__(self) -> str:
        where = ".".join(part for part in (self.resource, self.operation) if part)
        prefix = f"{where}: " if where else ""
        suffix = f" (id={self.record_id})" if self.record_id is not None else ""
        return f"{prefix}{self.detail}{suffix}"


class NotFound(CatalogError):
    """No record matches the requested id."""


class ValidationRejected(CatalogError):
    """A write was rejected, locally or by the record store."""


class TransportFailure(CatalogError):
    """The remote call could not complete."""


class UploadFailure(CatalogError):
    """The object store did not accept the blob."""
