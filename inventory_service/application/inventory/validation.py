"""
Field validation for inventory commands.

Constraints are declared as pydantic models and checked before any
repository call. Failures become INPUT_VALIDATION_FAILED service errors.
"""

import logging
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, ValidationError

from inventory_service.application.inventory.dtos import PageQuery
from inventory_service.application.inventory.errors import ServiceError
from inventory_service.domain.inventory.entities import AMOUNT_PRECISION, AMOUNT_SCALE
from inventory_service.domain.inventory.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Cursor,
)

logger = logging.getLogger(__name__)

NAME_MIN_LEN = 3
NAME_MAX_LEN = 50
DESCRIPTION_MAX_LEN = 255


class PersonFields(BaseModel):
    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: EmailStr


class ItemFields(BaseModel):
    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    description: str = Field(..., max_length=DESCRIPTION_MAX_LEN)
    unit_price: Decimal = Field(
        ..., ge=0, max_digits=AMOUNT_PRECISION, decimal_places=AMOUNT_SCALE
    )


class InvoiceFields(BaseModel):
    total: Decimal = Field(
        ..., ge=0, max_digits=AMOUNT_PRECISION, decimal_places=AMOUNT_SCALE
    )
    paid: bool


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def validate_fields(model: type[BaseModel], **values: object) -> BaseModel:
    """Validate ``values`` against ``model``.

    Returns:
        The validated model instance.

    Raises:
        ServiceError: INPUT_VALIDATION_FAILED describing every violation.
    """
    try:
        return model(**values)
    except ValidationError as exc:
        message = _describe(exc)
        logger.info("Input validation failed: %s", message)
        raise ServiceError.input_validation(message) from exc


def normalize_email(email: str) -> str:
    """Lower-case an address so uniqueness does not depend on collation."""
    return email.strip().lower()


def ensure_matching_ids(path_id: str, body_id: str) -> None:
    """Reject updates whose path id and body id disagree.

    Raises:
        ServiceError: INPUT_VALIDATION_FAILED on mismatch.
    """
    if path_id != body_id:
        raise ServiceError.input_validation(
            f"Id in path ({path_id}) does not match id in body ({body_id})"
        )


def cursor_from_page_query(
    query: Optional[PageQuery], max_page_size: int = MAX_PAGE_SIZE
) -> Optional[Cursor]:
    """Build a storage cursor from a page query.

    A missing query stays None (the default first page). Non-positive page
    sizes are rejected; oversized ones are clamped to ``max_page_size``.

    Raises:
        ServiceError: INPUT_VALIDATION_FAILED for ``page_size <= 0``.
    """
    if query is None:
        return None
    page_size = DEFAULT_PAGE_SIZE if query.page_size is None else query.page_size
    try:
        cursor = Cursor(last_seen_id=query.last_id, page_size=page_size)
    except ValueError as exc:
        raise ServiceError.input_validation(str(exc)) from exc
    return cursor.clamped(max_page_size)
