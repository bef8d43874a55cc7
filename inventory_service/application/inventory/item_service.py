"""
Service: Items.

Input: item commands and page queries, plus the caller's Claims.
Output: Item entities or a DeleteResult.
Side effects: writes through the ItemRepository port.
Failure cases: ServiceError.
"""

import logging
from typing import Optional

from inventory_service.application.inventory.contracts import ItemService
from inventory_service.application.inventory.conversions import item_from_row
from inventory_service.application.inventory.dtos import (
    CreateItemCommand,
    PageQuery,
    UpdateItemCommand,
)
from inventory_service.application.inventory.errors import repository_errors
from inventory_service.application.inventory.validation import (
    ItemFields,
    cursor_from_page_query,
    ensure_matching_ids,
    validate_fields,
)
from inventory_service.domain.inventory.entities import DeleteResult, Item
from inventory_service.domain.inventory.pagination import MAX_PAGE_SIZE
from inventory_service.domain.inventory.ports import ItemRepository
from inventory_service.shared.security.tokens import Claims

logger = logging.getLogger(__name__)


class DefaultItemService(ItemService):
    def __init__(
        self, repository: ItemRepository, max_page_size: int = MAX_PAGE_SIZE
    ) -> None:
        self._repository = repository
        self._max_page_size = max_page_size

    async def create(self, command: CreateItemCommand, claims: Claims) -> Item:
        fields = validate_fields(
            ItemFields,
            name=command.name,
            description=command.description,
            unit_price=command.unit_price,
        )
        logger.info("Creating item on behalf of %s", claims.subject)
        with repository_errors():
            row = await self._repository.create(
                fields.name, fields.description, fields.unit_price, claims.subject
            )
        return item_from_row(row)

    async def get(self, item_id: str, claims: Claims) -> Item:
        with repository_errors():
            row = await self._repository.get_by_external_id(item_id)
        return item_from_row(row)

    async def list_page(
        self, query: Optional[PageQuery], claims: Claims
    ) -> list[Item]:
        cursor = cursor_from_page_query(query, self._max_page_size)
        with repository_errors():
            rows = await self._repository.list_page(cursor)
        return [item_from_row(row) for row in rows]

    async def update(
        self, item_id: str, command: UpdateItemCommand, claims: Claims
    ) -> Item:
        ensure_matching_ids(item_id, command.id)
        fields = validate_fields(
            ItemFields,
            name=command.name,
            description=command.description,
            unit_price=command.unit_price,
        )
        logger.info("Updating item %s on behalf of %s", item_id, claims.subject)
        with repository_errors():
            row = await self._repository.update(
                item_id,
                fields.name,
                fields.description,
                fields.unit_price,
                claims.subject,
            )
        return item_from_row(row)

    async def delete(self, item_id: str, claims: Claims) -> DeleteResult:
        logger.info("Deleting item %s on behalf of %s", item_id, claims.subject)
        with repository_errors():
            await self._repository.delete(item_id)
        return DeleteResult(id=item_id)
