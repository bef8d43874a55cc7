"""
Row to entity conversions.

Pure mapping functions; services call them after every successful
repository call. External ids leave as strings, never as UUID objects.
"""

from inventory_service.domain.inventory.entities import (
    AuditInfo,
    Invoice,
    InvoiceItemLink,
    Item,
    Person,
)
from inventory_service.domain.inventory.rows import (
    InvoiceItemRow,
    InvoiceRow,
    InvoiceWithItemsRow,
    ItemRow,
    PersonRow,
)


def audit_from_row(row: PersonRow | ItemRow | InvoiceRow) -> AuditInfo:
    return AuditInfo(
        created_by=row.created_by,
        created_at=row.created_at,
        changed_by=row.changed_by,
        updated_at=row.updated_at,
    )


def person_from_row(row: PersonRow) -> Person:
    return Person(
        seq=row.id,
        id=str(row.alt_id),
        name=row.name,
        email=row.email,
        audit_info=audit_from_row(row),
    )


def item_from_row(row: ItemRow) -> Item:
    return Item(
        seq=row.id,
        id=str(row.alt_id),
        name=row.name,
        description=row.description,
        unit_price=row.unit_price,
        audit_info=audit_from_row(row),
    )


def invoice_from_row(row: InvoiceRow) -> Invoice:
    """Convert an invoice row; the item list is left empty."""
    return Invoice(
        seq=row.id,
        id=str(row.alt_id),
        user_id=str(row.user_id),
        total=row.total,
        paid=row.paid,
        audit_info=audit_from_row(row),
    )


def invoice_from_aggregate(aggregate: InvoiceWithItemsRow) -> Invoice:
    """Convert an invoice together with its ordered items."""
    row = aggregate.invoice
    return Invoice(
        seq=row.id,
        id=str(row.alt_id),
        user_id=str(row.user_id),
        total=row.total,
        paid=row.paid,
        audit_info=audit_from_row(row),
        items=[item_from_row(item) for item in aggregate.items],
    )


def link_from_row(row: InvoiceItemRow) -> InvoiceItemLink:
    return InvoiceItemLink(invoice_id=str(row.invoice_id), item_id=str(row.item_id))
