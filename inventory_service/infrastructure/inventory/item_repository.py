"""
Adapter: Item repository.

Implements ItemRepository port.
Persists and retrieves sellable items through the shared async engine.
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
from inventory_service.domain.inventory.ports import ItemRepository
from inventory_service.domain.inventory.rows import ItemRow
from inventory_service.infrastructure.inventory.errors import (
    parse_external_id,
    storage_errors,
)
from inventory_service.infrastructure.inventory.queries import apply_cursor
from inventory_service.infrastructure.inventory.tables import items

logger = logging.getLogger(__name__)


def _to_row(mapping: Mapping[str, Any]) -> ItemRow:
    return ItemRow(**dict(mapping))


class ItemRepositoryAdapter(ItemRepository):
    """Persists items in the ``items`` table."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def create(
        self, name: str, description: str, unit_price: Decimal, actor: str
    ) -> ItemRow:
        now = datetime.now(timezone.utc)
        statement = (
            insert(items)
            .values(
                alt_id=uuid4(),
                name=name,
                description=description,
                unit_price=unit_price,
                created_by=actor,
                created_at=now,
                changed_by=actor,
                updated_at=now,
            )
            .returning(*items.c)
        )
        with storage_errors("create item"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                row = _to_row(result.mappings().one())

        logger.debug("Created item seq=%d.", row.id)
        return row

    async def get_by_sequence_id(self, seq: int) -> ItemRow:
        statement = select(items).where(items.c.id == seq)
        with storage_errors("get item by sequence id"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def get_by_external_id(self, external_id: str) -> ItemRow:
        alt_id = parse_external_id(external_id)
        statement = select(items).where(items.c.alt_id == alt_id)
        with storage_errors("get item by external id"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def list_page(self, cursor: Optional[Cursor] = None) -> list[ItemRow]:
        statement = apply_cursor(select(items), items.c.id, cursor)
        with storage_errors("list items"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return [_to_row(mapping) for mapping in result.mappings().all()]

    async def update(
        self,
        external_id: str,
        name: str,
        description: str,
        unit_price: Decimal,
        actor: str,
    ) -> ItemRow:
        alt_id = parse_external_id(external_id)
        statement = (
            update(items)
            .where(items.c.alt_id == alt_id)
            .values(
                name=name,
                description=description,
                unit_price=unit_price,
                changed_by=actor,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(*items.c)
        )
        with storage_errors("update item"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def delete(self, external_id: str) -> None:
        alt_id = parse_external_id(external_id)
        statement = delete(items).where(items.c.alt_id == alt_id)
        with storage_errors("delete item"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                if result.rowcount == 0:
                    raise RepositoryError.not_found(f"Item not found: {external_id}")

        logger.debug("Deleted item %s.", external_id)
