"""
Row shapes returned by repository ports.

Rows mirror storage columns one to one. Only repositories produce them;
only services convert them into entities.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class PersonRow:
    id: int
    alt_id: UUID
    name: str
    email: str
    created_by: str
    created_at: datetime
    changed_by: str
    updated_at: datetime


@dataclass(frozen=True)
class ItemRow:
    id: int
    alt_id: UUID
    name: str
    description: str
    unit_price: Decimal
    created_by: str
    created_at: datetime
    changed_by: str
    updated_at: datetime


@dataclass(frozen=True)
class InvoiceRow:
    id: int
    alt_id: UUID
    user_id: UUID
    total: Decimal
    paid: bool
    created_by: str
    created_at: datetime
    changed_by: str
    updated_at: datetime


@dataclass(frozen=True)
class InvoiceItemRow:
    invoice_id: UUID
    item_id: UUID


@dataclass(frozen=True)
class InvoiceWithItemsRow:
    """An invoice row together with the item rows joined to it, in order."""

    invoice: InvoiceRow
    items: list[ItemRow]
