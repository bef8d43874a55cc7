"""
Relational schema of the inventory store.

Declared with SQLAlchemy Core so repositories can build typed statements.
``id`` is the storage sequence id; ``alt_id`` is the external id.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Uuid,
)

from inventory_service.domain.inventory.entities import AMOUNT_PRECISION, AMOUNT_SCALE

metadata = MetaData()


def _audit_columns() -> list[Column]:
    return [
        Column("created_by", String(255), nullable=False),
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("changed_by", String(255), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
    ]


persons = Table(
    "persons",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("alt_id", Uuid, nullable=False, unique=True),
    Column("name", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    *_audit_columns(),
    sqlite_autoincrement=True,
)

items = Table(
    "items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("alt_id", Uuid, nullable=False, unique=True),
    Column("name", String(50), nullable=False),
    Column("description", String(255), nullable=False),
    Column("unit_price", Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False),
    *_audit_columns(),
    sqlite_autoincrement=True,
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("alt_id", Uuid, nullable=False, unique=True),
    Column(
        "user_id",
        Uuid,
        ForeignKey("persons.alt_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("total", Numeric(AMOUNT_PRECISION, AMOUNT_SCALE), nullable=False),
    Column("paid", Boolean, nullable=False, default=False),
    *_audit_columns(),
    sqlite_autoincrement=True,
)

invoices_items = Table(
    "invoices_items",
    metadata,
    Column(
        "invoice_id",
        Uuid,
        ForeignKey("invoices.alt_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "item_id",
        Uuid,
        ForeignKey("items.alt_id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
