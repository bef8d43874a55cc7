"""
Tests for the item repository adapter.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from inventory_service.domain.inventory.errors import (
    RepositoryError,
    StorageErrorKind,
)
from inventory_service.domain.inventory.pagination import Cursor
from inventory_service.infrastructure.inventory.item_repository import (
    ItemRepositoryAdapter,
)


@pytest.fixture
def repository(engine) -> ItemRepositoryAdapter:
    return ItemRepositoryAdapter(engine)


class TestItemRepository:
    """Round trips and failure kinds for items."""

    @pytest.mark.asyncio
    async def test_create_then_read(self, repository) -> None:
        created = await repository.create(
            "Hex bolt", "M8 stainless", Decimal("0.35"), "alice"
        )
        fetched = await repository.get_by_external_id(str(created.alt_id))
        assert fetched == created
        assert fetched.unit_price == Decimal("0.35")

    @pytest.mark.asyncio
    async def test_update_then_read(self, repository) -> None:
        created = await repository.create("Hex bolt", "", Decimal("0.35"), "alice")
        updated = await repository.update(
            str(created.alt_id), "Hex bolt M10", "bigger", Decimal("0.50"), "bob"
        )
        assert updated.description == "bigger"
        assert updated.unit_price == Decimal("0.50")
        assert updated.changed_by == "bob"
        assert updated.created_by == "alice"
        assert await repository.get_by_sequence_id(created.id) == updated

    @pytest.mark.asyncio
    async def test_update_missing_is_not_found(self, repository) -> None:
        with pytest.raises(RepositoryError) as exc_info:
            await repository.update(str(uuid4()), "Ghost", "", Decimal("1"), "bob")
        assert exc_info.value.kind is StorageErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_malformed_id_is_invalid_identifier(self, repository) -> None:
        with pytest.raises(RepositoryError) as exc_info:
            await repository.get_by_external_id("12")
        assert exc_info.value.kind is StorageErrorKind.INVALID_IDENTIFIER

    @pytest.mark.asyncio
    async def test_delete_twice_is_not_found(self, repository) -> None:
        created = await repository.create("Washer", "", Decimal("0.05"), "alice")
        await repository.delete(str(created.alt_id))
        with pytest.raises(RepositoryError) as exc_info:
            await repository.delete(str(created.alt_id))
        assert exc_info.value.kind is StorageErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_page_respects_bounds_and_order(self, repository) -> None:
        created = [
            await repository.create(f"Item {index}", "", Decimal("1.00"), "a")
            for index in range(5)
        ]
        page = await repository.list_page(Cursor(last_seen_id=created[1].id, page_size=2))
        assert [row.id for row in page] == [created[2].id, created[3].id]
