"""
Service-layer errors for the inventory bounded context.

Services raise ServiceError only. Repository failures are translated with
a fixed table; INPUT_VALIDATION_FAILED is raised by services themselves,
before storage is consulted. The interface layer maps each kind to one
HTTP status.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator

from inventory_service.domain.inventory.errors import (
    RepositoryError,
    StorageErrorKind,
)


class ServiceErrorKind(Enum):
    """Every way a service call can fail."""

    NOT_FOUND = "not_found"
    INVALID_IDENTIFIER = "invalid_identifier"
    UNIQUE_CONSTRAINT_VIOLATION = "unique_constraint_violation"
    INPUT_VALIDATION_FAILED = "input_validation_failed"
    UNEXPECTED_FAILURE = "unexpected_failure"


STORAGE_TO_SERVICE: dict[StorageErrorKind, ServiceErrorKind] = {
    StorageErrorKind.NOT_FOUND: ServiceErrorKind.NOT_FOUND,
    StorageErrorKind.INVALID_IDENTIFIER: ServiceErrorKind.INVALID_IDENTIFIER,
    StorageErrorKind.UNIQUE_CONSTRAINT_VIOLATION: ServiceErrorKind.UNIQUE_CONSTRAINT_VIOLATION,
    StorageErrorKind.OTHER: ServiceErrorKind.UNEXPECTED_FAILURE,
}


class ServiceError(Exception):
    """Base error raised by every inventory service."""

    def __init__(self, kind: ServiceErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(self.message)

    @classmethod
    def from_repository_error(cls, error: RepositoryError) -> "ServiceError":
        return cls(STORAGE_TO_SERVICE[error.kind], error.message)

    @classmethod
    def input_validation(cls, message: str) -> "ServiceError":
        return cls(ServiceErrorKind.INPUT_VALIDATION_FAILED, message)


@contextmanager
def repository_errors() -> Iterator[None]:
    """Re-raise any RepositoryError from the block as a ServiceError."""
    try:
        yield
    except RepositoryError as exc:
        raise ServiceError.from_repository_error(exc) from exc
