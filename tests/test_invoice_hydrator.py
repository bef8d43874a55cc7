"""
Tests for folding joined invoice rows into an aggregate.
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from inventory_service.infrastructure.inventory.invoice_hydrator import (
    ITEM_PREFIX,
    fold_invoice_rows,
    labelled_item_columns,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
INVOICE_ID = uuid4()
OWNER_ID = uuid4()


def _joined_row(item_seq: int, item_name: str) -> dict:
    row = {
        "id": 1,
        "alt_id": INVOICE_ID,
        "user_id": OWNER_ID,
        "total": Decimal("30.00"),
        "paid": False,
        "created_by": "alice",
        "created_at": NOW,
        "changed_by": "alice",
        "updated_at": NOW,
    }
    item = {
        "id": item_seq,
        "alt_id": uuid4(),
        "name": item_name,
        "description": "",
        "unit_price": Decimal("10.00"),
        "created_by": "bob",
        "created_at": NOW,
        "changed_by": "bob",
        "updated_at": NOW,
    }
    row.update({f"{ITEM_PREFIX}{key}": value for key, value in item.items()})
    return row


class TestFoldInvoiceRows:
    """Tests for fold_invoice_rows."""

    def test_invoice_read_from_first_row(self) -> None:
        aggregate = fold_invoice_rows([_joined_row(4, "bolt"), _joined_row(9, "nut")])
        assert aggregate.invoice.alt_id == INVOICE_ID
        assert aggregate.invoice.user_id == OWNER_ID
        assert aggregate.invoice.total == Decimal("30.00")

    def test_items_keep_row_order(self) -> None:
        aggregate = fold_invoice_rows([_joined_row(4, "bolt"), _joined_row(9, "nut")])
        assert [item.id for item in aggregate.items] == [4, 9]
        assert [item.name for item in aggregate.items] == ["bolt", "nut"]
        assert aggregate.items[0].created_by == "bob"

    def test_empty_join_is_rejected(self) -> None:
        """An empty join cannot tell a missing invoice from an empty one."""
        with pytest.raises(ValueError):
            fold_invoice_rows([])


class TestLabelledItemColumns:
    def test_every_item_column_is_prefixed(self) -> None:
        names = [column.name for column in labelled_item_columns()]
        assert names
        assert all(name.startswith(ITEM_PREFIX) for name in names)
        assert "item_alt_id" in names
