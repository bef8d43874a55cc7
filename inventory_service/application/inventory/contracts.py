"""
Service contracts for the inventory bounded context.

Routers depend on these ABCs only; the default implementations are wired
once at startup and test doubles can stand in for them.
"""

from abc import ABC, abstractmethod
from typing import Optional

from inventory_service.application.inventory.dtos import (
    CreateInvoiceCommand,
    CreateItemCommand,
    CreatePersonCommand,
    PageQuery,
    UpdateInvoiceCommand,
    UpdateItemCommand,
    UpdatePersonCommand,
)
from inventory_service.domain.inventory.entities import (
    DeleteResult,
    Invoice,
    InvoiceItemLink,
    Item,
    Person,
)
from inventory_service.shared.security.tokens import Claims


class PersonService(ABC):
    @abstractmethod
    async def create(self, command: CreatePersonCommand, claims: Claims) -> Person:
        raise NotImplementedError

    @abstractmethod
    async def get(self, person_id: str, claims: Claims) -> Person:
        raise NotImplementedError

    @abstractmethod
    async def list_page(
        self, query: Optional[PageQuery], claims: Claims
    ) -> list[Person]:
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, person_id: str, command: UpdatePersonCommand, claims: Claims
    ) -> Person:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, person_id: str, claims: Claims) -> DeleteResult:
        raise NotImplementedError


class ItemService(ABC):
    @abstractmethod
    async def create(self, command: CreateItemCommand, claims: Claims) -> Item:
        raise NotImplementedError

    @abstractmethod
    async def get(self, item_id: str, claims: Claims) -> Item:
        raise NotImplementedError

    @abstractmethod
    async def list_page(
        self, query: Optional[PageQuery], claims: Claims
    ) -> list[Item]:
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, item_id: str, command: UpdateItemCommand, claims: Claims
    ) -> Item:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, item_id: str, claims: Claims) -> DeleteResult:
        raise NotImplementedError


class InvoiceService(ABC):
    @abstractmethod
    async def create(self, command: CreateInvoiceCommand, claims: Claims) -> Invoice:
        raise NotImplementedError

    @abstractmethod
    async def get(
        self, invoice_id: str, claims: Claims, with_items: bool = False
    ) -> Invoice:
        """Return an invoice, populated with its items when ``with_items``."""
        raise NotImplementedError

    @abstractmethod
    async def list_page(
        self, query: Optional[PageQuery], claims: Claims
    ) -> list[Invoice]:
        raise NotImplementedError

    @abstractmethod
    async def find_by_user(self, user_id: str, claims: Claims) -> list[Invoice]:
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, invoice_id: str, command: UpdateInvoiceCommand, claims: Claims
    ) -> Invoice:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, invoice_id: str, claims: Claims) -> DeleteResult:
        raise NotImplementedError

    @abstractmethod
    async def add_item(
        self, invoice_id: str, item_id: str, claims: Claims
    ) -> InvoiceItemLink:
        raise NotImplementedError

    @abstractmethod
    async def remove_item(
        self, invoice_id: str, item_id: str, claims: Claims
    ) -> DeleteResult:
        raise NotImplementedError

    @abstractmethod
    async def list_item_links(
        self, invoice_id: str, claims: Claims
    ) -> list[InvoiceItemLink]:
        raise NotImplementedError
