"""
Adapter: Invoice repository.

Implements InvoiceRepository port.
Persists invoices, their item links, and assembles the invoice-with-items
aggregate from a single three-table join.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Mapping, Optional
from uuid import uuid4

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from inventory_service.domain.inventory.errors import RepositoryError
from inventory_service.domain.inventory.pagination import Cursor
from inventory_service.domain.inventory.ports import InvoiceRepository
from inventory_service.domain.inventory.rows import (
    InvoiceItemRow,
    InvoiceRow,
    InvoiceWithItemsRow,
)
from inventory_service.infrastructure.inventory.errors import (
    parse_external_id,
    storage_errors,
)
from inventory_service.infrastructure.inventory.invoice_hydrator import (
    fold_invoice_rows,
    labelled_item_columns,
)
from inventory_service.infrastructure.inventory.queries import apply_cursor
from inventory_service.infrastructure.inventory.tables import (
    invoices,
    invoices_items,
    items,
)

logger = logging.getLogger(__name__)


def _to_row(mapping: Mapping[str, Any]) -> InvoiceRow:
    return InvoiceRow(**dict(mapping))


class InvoiceRepositoryAdapter(InvoiceRepository):
    """Persists invoices in ``invoices`` and their items in ``invoices_items``.

    Implements the InvoiceRepository port defined in the domain layer.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def create(
        self, user_id: str, total: Decimal, paid: bool, actor: str
    ) -> InvoiceRow:
        owner_id = parse_external_id(user_id)
        now = datetime.now(timezone.utc)
        statement = (
            insert(invoices)
            .values(
                alt_id=uuid4(),
                user_id=owner_id,
                total=total,
                paid=paid,
                created_by=actor,
                created_at=now,
                changed_by=actor,
                updated_at=now,
            )
            .returning(*invoices.c)
        )
        with storage_errors("create invoice"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                row = _to_row(result.mappings().one())

        logger.debug("Created invoice seq=%d for user %s.", row.id, user_id)
        return row

    async def get_by_sequence_id(self, seq: int) -> InvoiceRow:
        statement = select(invoices).where(invoices.c.id == seq)
        with storage_errors("get invoice by sequence id"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def get_by_external_id(self, external_id: str) -> InvoiceRow:
        alt_id = parse_external_id(external_id)
        statement = select(invoices).where(invoices.c.alt_id == alt_id)
        with storage_errors("get invoice by external id"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def get_with_items(self, external_id: str) -> InvoiceWithItemsRow:
        """Return the invoice and its items in one join.

        The join yields nothing both for a missing invoice and for an
        invoice without items, so an empty result is followed by an
        existence check against ``invoices`` alone.

        Raises:
            RepositoryError: INVALID_IDENTIFIER for a malformed id,
                NOT_FOUND only when the invoice itself does not exist.
        """
        alt_id = parse_external_id(external_id)
        joined = (
            select(invoices, *labelled_item_columns())
            .select_from(
                invoices.join(
                    invoices_items, invoices_items.c.invoice_id == invoices.c.alt_id
                ).join(items, items.c.alt_id == invoices_items.c.item_id)
            )
            .where(invoices.c.alt_id == alt_id)
            .order_by(items.c.id.asc())
        )
        with storage_errors("get invoice with items"):
            async with self._engine.connect() as conn:
                result = await conn.execute(joined)
                rows = result.mappings().all()
                if rows:
                    return fold_invoice_rows(rows)

                logger.debug("Invoice %s has no items; checking existence.", external_id)
                fallback = await conn.execute(
                    select(invoices).where(invoices.c.alt_id == alt_id)
                )
                return InvoiceWithItemsRow(
                    invoice=_to_row(fallback.mappings().one()), items=[]
                )

    async def list_page(self, cursor: Optional[Cursor] = None) -> list[InvoiceRow]:
        statement = apply_cursor(select(invoices), invoices.c.id, cursor)
        with storage_errors("list invoices"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return [_to_row(mapping) for mapping in result.mappings().all()]

    async def find_by_user_id(self, user_id: str) -> list[InvoiceRow]:
        owner_id = parse_external_id(user_id)
        statement = (
            select(invoices)
            .where(invoices.c.user_id == owner_id)
            .order_by(invoices.c.id.asc())
        )
        with storage_errors("find invoices by user"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return [_to_row(mapping) for mapping in result.mappings().all()]

    async def update(
        self, external_id: str, total: Decimal, paid: bool, actor: str
    ) -> InvoiceRow:
        alt_id = parse_external_id(external_id)
        statement = (
            update(invoices)
            .where(invoices.c.alt_id == alt_id)
            .values(
                total=total,
                paid=paid,
                changed_by=actor,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(*invoices.c)
        )
        with storage_errors("update invoice"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def delete(self, external_id: str) -> None:
        alt_id = parse_external_id(external_id)
        statement = delete(invoices).where(invoices.c.alt_id == alt_id)
        # item links go with the invoice through ON DELETE CASCADE
        with storage_errors("delete invoice"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                if result.rowcount == 0:
                    raise RepositoryError.not_found(f"Invoice not found: {external_id}")

        logger.debug("Deleted invoice %s.", external_id)

    async def add_item(self, invoice_id: str, item_id: str) -> InvoiceItemRow:
        """Attach an item to an invoice.

        Raises:
            RepositoryError: UNIQUE_CONSTRAINT_VIOLATION when the item is
                already attached.
        """
        invoice_alt_id = parse_external_id(invoice_id)
        item_alt_id = parse_external_id(item_id)
        statement = (
            insert(invoices_items)
            .values(invoice_id=invoice_alt_id, item_id=item_alt_id)
            .returning(invoices_items.c.invoice_id, invoices_items.c.item_id)
        )
        with storage_errors("add item to invoice"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                return InvoiceItemRow(**dict(result.mappings().one()))

    async def remove_item(self, invoice_id: str, item_id: str) -> None:
        invoice_alt_id = parse_external_id(invoice_id)
        item_alt_id = parse_external_id(item_id)
        statement = delete(invoices_items).where(
            invoices_items.c.invoice_id == invoice_alt_id,
            invoices_items.c.item_id == item_alt_id,
        )
        with storage_errors("remove item from invoice"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                if result.rowcount == 0:
                    raise RepositoryError.not_found(
                        f"Item {item_id} is not attached to invoice {invoice_id}"
                    )

    async def get_items(self, invoice_id: str) -> list[InvoiceItemRow]:
        invoice_alt_id = parse_external_id(invoice_id)
        statement = (
            select(invoices_items.c.invoice_id, invoices_items.c.item_id)
            .select_from(
                invoices_items.join(items, items.c.alt_id == invoices_items.c.item_id)
            )
            .where(invoices_items.c.invoice_id == invoice_alt_id)
            .order_by(items.c.id.asc())
        )
        with storage_errors("get invoice items"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return [InvoiceItemRow(**dict(m)) for m in result.mappings().all()]
