"""
Domain entities for the inventory bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

# Monetary amounts: total digits and digits after the decimal point.
AMOUNT_PRECISION = 12
AMOUNT_SCALE = 2


@dataclass(frozen=True)
class AuditInfo:
    """Who created and last changed a record, and when."""

    created_by: str
    created_at: datetime
    changed_by: str
    updated_at: datetime


@dataclass(frozen=True)
class Person:
    """A person who can own invoices.

    ``seq`` is the storage sequence id; it is only meaningful as a
    pagination position. ``id`` is the stable external identifier.
    """

    seq: int
    id: str
    name: str
    email: str
    audit_info: AuditInfo


@dataclass(frozen=True)
class Item:
    """A sellable item that can be attached to invoices."""

    seq: int
    id: str
    name: str
    description: str
    unit_price: Decimal
    audit_info: AuditInfo


@dataclass(frozen=True)
class Invoice:
    """An invoice, optionally populated with its line items."""

    seq: int
    id: str
    user_id: str
    total: Decimal
    paid: bool
    audit_info: AuditInfo
    items: list[Item] = field(default_factory=list)


@dataclass(frozen=True)
class InvoiceItemLink:
    """Association between an invoice and an item."""

    invoice_id: str
    item_id: str


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a delete operation."""

    id: str
    deleted: bool = True
