"""
Reshapes the flat invoice ⋈ item result set into one aggregate row.

The join returns one row per attached item. Invoice columns repeat on
every row and are read once from the first; item columns are labelled
with ``ITEM_PREFIX`` and folded, in order, into a list of item rows.
"""

from typing import Any, Mapping, Sequence

from sqlalchemy.sql.elements import Label

from inventory_service.domain.inventory.rows import (
    InvoiceRow,
    InvoiceWithItemsRow,
    ItemRow,
)
from inventory_service.infrastructure.inventory.tables import invoices, items

ITEM_PREFIX = "item_"


def labelled_item_columns() -> list[Label]:
    """Item columns renamed so they do not collide with invoice columns."""
    return [column.label(f"{ITEM_PREFIX}{column.name}") for column in items.c]


def invoice_from_mapping(mapping: Mapping[str, Any]) -> InvoiceRow:
    return InvoiceRow(**{column.name: mapping[column.name] for column in invoices.c})


def item_from_mapping(mapping: Mapping[str, Any]) -> ItemRow:
    return ItemRow(
        **{column.name: mapping[f"{ITEM_PREFIX}{column.name}"] for column in items.c}
    )


def fold_invoice_rows(rows: Sequence[Mapping[str, Any]]) -> InvoiceWithItemsRow:
    """Fold joined rows into an invoice with its ordered items.

    Args:
        rows: Join result, one mapping per attached item, in item order.

    Raises:
        ValueError: ``rows`` is empty. An empty join does not say whether
            the invoice exists; callers must check that separately.
    """
    if not rows:
        raise ValueError("cannot hydrate an invoice from an empty join")
    return InvoiceWithItemsRow(
        invoice=invoice_from_mapping(rows[0]),
        items=[item_from_mapping(row) for row in rows],
    )
