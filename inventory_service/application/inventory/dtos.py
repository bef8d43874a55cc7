"""
Data Transfer Objects for the inventory application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior; field constraints are
checked by the services.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PageQuery:
    """Input DTO for listing a collection.

    Attributes:
        last_id: Sequence id of the last row already seen, if any.
        page_size: Requested number of rows; None means the default.
    """

    last_id: Optional[int] = None
    page_size: Optional[int] = None


@dataclass(frozen=True)
class CreatePersonCommand:
    name: str
    email: str


@dataclass(frozen=True)
class UpdatePersonCommand:
    """Input DTO for replacing a person's fields.

    Attributes:
        id: External id carried in the request body. Must equal the id
            in the request path.
        name: New display name (3-50 characters).
        email: New email address.
    """

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class CreateItemCommand:
    name: str
    description: str
    unit_price: Decimal


@dataclass(frozen=True)
class UpdateItemCommand:
    id: str
    name: str
    description: str
    unit_price: Decimal


@dataclass(frozen=True)
class CreateInvoiceCommand:
    """Input DTO for creating an invoice.

    Attributes:
        user_id: External id of the owning person.
        total: Invoice total, never negative.
        paid: Whether the invoice is settled.
    """

    user_id: str
    total: Decimal
    paid: bool = False


@dataclass(frozen=True)
class UpdateInvoiceCommand:
    id: str
    total: Decimal
    paid: bool
