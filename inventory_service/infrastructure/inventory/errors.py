"""
Translation of driver failures into storage-layer errors.

Every SQLAlchemy or connection failure raised inside ``storage_errors()``
leaves as a RepositoryError:

- no row where exactly one was expected -> NOT_FOUND
- uniqueness constraint rejection       -> UNIQUE_CONSTRAINT_VIOLATION
- anything else (incl. pool timeouts)   -> OTHER

Malformed caller identifiers are rejected by ``parse_external_id`` before
any statement is issued.
"""

import logging
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError

from inventory_service.domain.inventory.errors import RepositoryError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"


def parse_external_id(value: str) -> UUID:
    """Parse a caller-supplied external id.

    Raises:
        RepositoryError: INVALID_IDENTIFIER when ``value`` is not a UUID.
    """
    try:
        return UUID(str(value))
    except ValueError as exc:
        raise RepositoryError.invalid_identifier(str(value)) from exc


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True when an IntegrityError reports a uniqueness rejection.

    PostgreSQL drivers expose the SQLSTATE; SQLite only reports it in the
    message text.
    """
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code == UNIQUE_VIOLATION_SQLSTATE
    return "unique" in str(orig).lower()


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Run a storage call, translating driver failures to RepositoryError.

    Args:
        operation: Short description used in log lines and messages.
    """
    try:
        yield
    except RepositoryError:
        raise
    except NoResultFound as exc:
        raise RepositoryError.not_found(f"{operation}: no matching row") from exc
    except IntegrityError as exc:
        if is_unique_violation(exc):
            logger.info("%s rejected by unique constraint", operation)
            raise RepositoryError.unique_violation(
                f"{operation}: duplicate value violates a unique constraint"
            ) from exc
        logger.error("%s failed integrity check: %s", operation, exc.orig)
        raise RepositoryError.other(f"{operation}: integrity error") from exc
    except (SQLAlchemyError, OSError) as exc:
        logger.error("%s failed: %s", operation, type(exc).__name__)
        raise RepositoryError.other(f"{operation}: storage failure") from exc
