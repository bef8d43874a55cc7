"""
Storage-layer errors for the inventory bounded context.

Repository ports raise RepositoryError with one of a fixed set of kinds.
Adapters translate driver failures into these kinds; services translate
them further into service-layer errors.
No framework imports allowed.
"""

from enum import Enum


class StorageErrorKind(Enum):
    """Every way a repository call can fail."""

    NOT_FOUND = "not_found"
    INVALID_IDENTIFIER = "invalid_identifier"
    UNIQUE_CONSTRAINT_VIOLATION = "unique_constraint_violation"
    OTHER = "other"


class RepositoryError(Exception):
    """Base error raised by every repository port."""

    def __init__(self, kind: StorageErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(self.message)

    @classmethod
    def not_found(cls, message: str) -> "RepositoryError":
        return cls(StorageErrorKind.NOT_FOUND, message)

    @classmethod
    def invalid_identifier(cls, value: str) -> "RepositoryError":
        return cls(StorageErrorKind.INVALID_IDENTIFIER, f"Invalid identifier: {value}")

    @classmethod
    def unique_violation(cls, message: str) -> "RepositoryError":
        return cls(StorageErrorKind.UNIQUE_CONSTRAINT_VIOLATION, message)

    @classmethod
    def other(cls, message: str) -> "RepositoryError":
        return cls(StorageErrorKind.OTHER, message)
