"""
Adapter: Person repository.

Implements PersonRepository port.
Persists and retrieves persons through the shared async engine.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional
from uuid import uuid4

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from inventory_service.domain.inventory.errors import RepositoryError
from inventory_service.domain.inventory.pagination import Cursor
from inventory_service.domain.inventory.ports import PersonRepository
from inventory_service.domain.inventory.rows import PersonRow
from inventory_service.infrastructure.inventory.errors import (
    parse_external_id,
    storage_errors,
)
from inventory_service.infrastructure.inventory.queries import apply_cursor
from inventory_service.infrastructure.inventory.tables import persons

logger = logging.getLogger(__name__)


def _to_row(mapping: Mapping[str, Any]) -> PersonRow:
    return PersonRow(**dict(mapping))


class PersonRepositoryAdapter(PersonRepository):
    """Persists persons in the ``persons`` table.

    Implements the PersonRepository port defined in the domain layer.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def create(self, name: str, email: str, actor: str) -> PersonRow:
        """Insert a person with a fresh external id.

        Raises:
            RepositoryError: UNIQUE_CONSTRAINT_VIOLATION when the email is
                already registered.
        """
        now = datetime.now(timezone.utc)
        statement = (
            insert(persons)
            .values(
                alt_id=uuid4(),
                name=name,
                email=email,
                created_by=actor,
                created_at=now,
                changed_by=actor,
                updated_at=now,
            )
            .returning(*persons.c)
        )
        with storage_errors("create person"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                row = _to_row(result.mappings().one())

        logger.debug("Created person seq=%d.", row.id)
        return row

    async def get_by_sequence_id(self, seq: int) -> PersonRow:
        statement = select(persons).where(persons.c.id == seq)
        with storage_errors("get person by sequence id"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def get_by_external_id(self, external_id: str) -> PersonRow:
        alt_id = parse_external_id(external_id)
        statement = select(persons).where(persons.c.alt_id == alt_id)
        with storage_errors("get person by external id"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def list_page(self, cursor: Optional[Cursor] = None) -> list[PersonRow]:
        statement = apply_cursor(select(persons), persons.c.id, cursor)
        with storage_errors("list persons"):
            async with self._engine.connect() as conn:
                result = await conn.execute(statement)
                return [_to_row(mapping) for mapping in result.mappings().all()]

    async def update(
        self, external_id: str, name: str, email: str, actor: str
    ) -> PersonRow:
        """Overwrite name and email; ``created_*`` columns are left untouched.

        Raises:
            RepositoryError: INVALID_IDENTIFIER for a malformed id (no SQL
                issued), NOT_FOUND when no row matches,
                UNIQUE_CONSTRAINT_VIOLATION for a duplicate email.
        """
        alt_id = parse_external_id(external_id)
        statement = (
            update(persons)
            .where(persons.c.alt_id == alt_id)
            .values(
                name=name,
                email=email,
                changed_by=actor,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(*persons.c)
        )
        with storage_errors("update person"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                return _to_row(result.mappings().one())

    async def delete(self, external_id: str) -> None:
        alt_id = parse_external_id(external_id)
        statement = delete(persons).where(persons.c.alt_id == alt_id)
        with storage_errors("delete person"):
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                if result.rowcount == 0:
                    raise RepositoryError.not_found(f"Person not found: {external_id}")

        logger.debug("Deleted person %s.", external_id)
