"""
Service: Invoices and their item links.

Input: invoice commands, page queries and external ids, plus Claims.
Output: Invoice entities (optionally populated with items), item links,
or a DeleteResult.
Side effects: writes through the InvoiceRepository port. Reads the person
and item repositories to check that referenced records exist.
Failure cases: ServiceError.
"""

import logging
from typing import Optional

from inventory_service.application.inventory.contracts import InvoiceService
from inventory_service.application.inventory.conversions import (
    invoice_from_aggregate,
    invoice_from_row,
    link_from_row,
)
from inventory_service.application.inventory.dtos import (
    CreateInvoiceCommand,
    PageQuery,
    UpdateInvoiceCommand,
)
from inventory_service.application.inventory.errors import repository_errors
from inventory_service.application.inventory.validation import (
    InvoiceFields,
    cursor_from_page_query,
    ensure_matching_ids,
    validate_fields,
)
from inventory_service.domain.inventory.entities import (
    DeleteResult,
    Invoice,
    InvoiceItemLink,
)
from inventory_service.domain.inventory.pagination import MAX_PAGE_SIZE
from inventory_service.domain.inventory.ports import (
    InvoiceRepository,
    ItemRepository,
    PersonRepository,
)
from inventory_service.shared.security.tokens import Claims

logger = logging.getLogger(__name__)


class DefaultInvoiceService(InvoiceService):
    """Orchestrates invoices, their owners, and their attached items.

    Creating an invoice requires the owning person to exist. Attaching an
    item requires both the invoice and the item to exist; attaching the
    same item twice is a unique constraint violation.
    """

    def __init__(
        self,
        repository: InvoiceRepository,
        persons: PersonRepository,
        items: ItemRepository,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self._repository = repository
        self._persons = persons
        self._items = items
        self._max_page_size = max_page_size

    async def create(self, command: CreateInvoiceCommand, claims: Claims) -> Invoice:
        fields = validate_fields(InvoiceFields, total=command.total, paid=command.paid)
        logger.info(
            "Creating invoice for user %s on behalf of %s",
            command.user_id,
            claims.subject,
        )
        with repository_errors():
            await self._persons.get_by_external_id(command.user_id)
            row = await self._repository.create(
                command.user_id, fields.total, fields.paid, claims.subject
            )
        return invoice_from_row(row)

    async def get(
        self, invoice_id: str, claims: Claims, with_items: bool = False
    ) -> Invoice:
        with repository_errors():
            if with_items:
                aggregate = await self._repository.get_with_items(invoice_id)
                return invoice_from_aggregate(aggregate)
            row = await self._repository.get_by_external_id(invoice_id)
        return invoice_from_row(row)

    async def list_page(
        self, query: Optional[PageQuery], claims: Claims
    ) -> list[Invoice]:
        cursor = cursor_from_page_query(query, self._max_page_size)
        with repository_errors():
            rows = await self._repository.list_page(cursor)
        return [invoice_from_row(row) for row in rows]

    async def find_by_user(self, user_id: str, claims: Claims) -> list[Invoice]:
        with repository_errors():
            rows = await self._repository.find_by_user_id(user_id)
        return [invoice_from_row(row) for row in rows]

    async def update(
        self, invoice_id: str, command: UpdateInvoiceCommand, claims: Claims
    ) -> Invoice:
        ensure_matching_ids(invoice_id, command.id)
        fields = validate_fields(InvoiceFields, total=command.total, paid=command.paid)
        logger.info("Updating invoice %s on behalf of %s", invoice_id, claims.subject)
        with repository_errors():
            row = await self._repository.update(
                invoice_id, fields.total, fields.paid, claims.subject
            )
        return invoice_from_row(row)

    async def delete(self, invoice_id: str, claims: Claims) -> DeleteResult:
        logger.info("Deleting invoice %s on behalf of %s", invoice_id, claims.subject)
        with repository_errors():
            await self._repository.delete(invoice_id)
        return DeleteResult(id=invoice_id)

    async def add_item(
        self, invoice_id: str, item_id: str, claims: Claims
    ) -> InvoiceItemLink:
        logger.info(
            "Attaching item %s to invoice %s on behalf of %s",
            item_id,
            invoice_id,
            claims.subject,
        )
        with repository_errors():
            await self._repository.get_by_external_id(invoice_id)
            await self._items.get_by_external_id(item_id)
            row = await self._repository.add_item(invoice_id, item_id)
        return link_from_row(row)

    async def remove_item(
        self, invoice_id: str, item_id: str, claims: Claims
    ) -> DeleteResult:
        logger.info(
            "Detaching item %s from invoice %s on behalf of %s",
            item_id,
            invoice_id,
            claims.subject,
        )
        with repository_errors():
            await self._repository.remove_item(invoice_id, item_id)
        return DeleteResult(id=item_id)

    async def list_item_links(
        self, invoice_id: str, claims: Claims
    ) -> list[InvoiceItemLink]:
        with repository_errors():
            await self._repository.get_by_external_id(invoice_id)
            rows = await self._repository.get_items(invoice_id)
        return [link_from_row(row) for row in rows]
