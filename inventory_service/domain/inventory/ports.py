"""
Port interfaces (ABCs) for the inventory bounded context.

Ports define the contracts that services require from storage.
Infrastructure adapters implement these interfaces.
Every method either returns rows or raises RepositoryError; external ids
are accepted as strings and rejected with INVALID_IDENTIFIER before any
statement is issued when they are not well-formed.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from inventory_service.domain.inventory.pagination import Cursor
from inventory_service.domain.inventory.rows import (
    InvoiceItemRow,
    InvoiceRow,
    InvoiceWithItemsRow,
    ItemRow,
    PersonRow,
)


class PersonRepository(ABC):
    """Port for persisting and retrieving persons."""

    @abstractmethod
    async def create(self, name: str, email: str, actor: str) -> PersonRow:
        """Insert a person and return the stored row."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_sequence_id(self, seq: int) -> PersonRow:
        """Return the person with the given sequence id."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> PersonRow:
        """Return the person with the given external id."""
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, cursor: Optional[Cursor] = None) -> list[PersonRow]:
        """Return one page of persons ordered by sequence id."""
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, external_id: str, name: str, email: str, actor: str
    ) -> PersonRow:
        """Overwrite a person's fields and return the updated row."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, external_id: str) -> None:
        """Delete a person by external id."""
        raise NotImplementedError


class ItemRepository(ABC):
    """Port for persisting and retrieving items."""

    @abstractmethod
    async def create(
        self, name: str, description: str, unit_price: Decimal, actor: str
    ) -> ItemRow:
        """Insert an item and return the stored row."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_sequence_id(self, seq: int) -> ItemRow:
        """Return the item with the given sequence id."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> ItemRow:
        """Return the item with the given external id."""
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, cursor: Optional[Cursor] = None) -> list[ItemRow]:
        """Return one page of items ordered by sequence id."""
        raise NotImplementedError

    @abstractmethod
    async def update(
        self,
        external_id: str,
        name: str,
        description: str,
        unit_price: Decimal,
        actor: str,
    ) -> ItemRow:
        """Overwrite an item's fields and return the updated row."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, external_id: str) -> None:
        """Delete an item by external id."""
        raise NotImplementedError


class InvoiceRepository(ABC):
    """Port for persisting and retrieving invoices and their item links."""

    @abstractmethod
    async def create(
        self, user_id: str, total: Decimal, paid: bool, actor: str
    ) -> InvoiceRow:
        """Insert an invoice and return the stored row."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_sequence_id(self, seq: int) -> InvoiceRow:
        """Return the invoice with the given sequence id."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> InvoiceRow:
        """Return the invoice with the given external id."""
        raise NotImplementedError

    @abstractmethod
    async def get_with_items(self, external_id: str) -> InvoiceWithItemsRow:
        """Return the invoice and every item attached to it.

        An invoice with no items is returned with an empty item list;
        only a missing invoice raises NOT_FOUND.
        """
        raise NotImplementedError

    @abstractmethod
    async def list_page(self, cursor: Optional[Cursor] = None) -> list[InvoiceRow]:
        """Return one page of invoices ordered by sequence id."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> list[InvoiceRow]:
        """Return every invoice owned by a person, ordered by sequence id."""
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, external_id: str, total: Decimal, paid: bool, actor: str
    ) -> InvoiceRow:
        """Overwrite an invoice's fields and return the updated row."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, external_id: str) -> None:
        """Delete an invoice by external id."""
        raise NotImplementedError

    @abstractmethod
    async def add_item(self, invoice_id: str, item_id: str) -> InvoiceItemRow:
        """Attach an item to an invoice."""
        raise NotImplementedError

    @abstractmethod
    async def remove_item(self, invoice_id: str, item_id: str) -> None:
        """Detach an item from an invoice."""
        raise NotImplementedError

    @abstractmethod
    async def get_items(self, invoice_id: str) -> list[InvoiceItemRow]:
        """Return the item links of an invoice."""
        raise NotImplementedError
