"""
Statement helpers shared by the inventory repositories.
"""

from typing import Optional

from sqlalchemy import Column
from sqlalchemy.sql.expression import Select

from inventory_service.domain.inventory.pagination import Cursor, resolve_cursor


def apply_cursor(
    statement: Select, sequence_column: Column, cursor: Optional[Cursor]
) -> Select:
    """Restrict a select to the page described by ``cursor``.

    Without ``last_seen_id`` the page starts at the first row; otherwise
    only rows with a strictly greater sequence id qualify. Rows are always
    ordered ascending by sequence id.
    """
    cursor = resolve_cursor(cursor)
    if cursor.last_seen_id is not None:
        statement = statement.where(sequence_column > cursor.last_seen_id)
    return statement.order_by(sequence_column.asc()).limit(cursor.page_size)
