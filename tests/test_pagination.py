"""
Tests for cursor pagination.

Cursor construction, clamping, and the select shape it produces.
"""

import pytest
from sqlalchemy import select

from inventory_service.application.inventory.dtos import PageQuery
from inventory_service.application.inventory.errors import (
    ServiceError,
    ServiceErrorKind,
)
from inventory_service.application.inventory.validation import (
    cursor_from_page_query,
)
from inventory_service.domain.inventory.pagination import (
    DEFAULT_PAGE_SIZE,
    Cursor,
    resolve_cursor,
)
from inventory_service.infrastructure.inventory.queries import apply_cursor
from inventory_service.infrastructure.inventory.tables import persons


class TestCursor:
    """Tests for the Cursor value object."""

    def test_absent_cursor_is_first_default_page(self) -> None:
        assert resolve_cursor(None) == Cursor(last_seen_id=None, page_size=10)

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_non_positive_page_size_rejected(self, page_size: int) -> None:
        with pytest.raises(ValueError):
            Cursor(page_size=page_size)

    def test_clamped_caps_page_size(self) -> None:
        assert Cursor(5, 500).clamped(100) == Cursor(5, 100)

    def test_clamped_keeps_small_page_size(self) -> None:
        cursor = Cursor(5, 20)
        assert cursor.clamped(100) is cursor

    def test_after_moves_position(self) -> None:
        assert Cursor(None, 3).after(9) == Cursor(9, 3)


class TestApplyCursor:
    """Tests for the two select shapes."""

    def test_first_page_has_no_where_clause(self) -> None:
        sql = str(apply_cursor(select(persons), persons.c.id, None))
        assert "WHERE" not in sql
        assert "ORDER BY persons.id ASC" in sql
        assert "LIMIT" in sql

    def test_later_page_filters_on_sequence_id(self) -> None:
        sql = str(apply_cursor(select(persons), persons.c.id, Cursor(7, 5)))
        assert "WHERE persons.id >" in sql
        assert "ORDER BY persons.id ASC" in sql


class TestCursorFromPageQuery:
    """Tests for the page size policy applied by services."""

    def test_missing_query_stays_none(self) -> None:
        assert cursor_from_page_query(None) is None

    def test_missing_page_size_uses_default(self) -> None:
        cursor = cursor_from_page_query(PageQuery(last_id=3))
        assert cursor == Cursor(3, DEFAULT_PAGE_SIZE)

    def test_oversized_page_is_clamped(self) -> None:
        cursor = cursor_from_page_query(PageQuery(page_size=1000), max_page_size=100)
        assert cursor.page_size == 100

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_non_positive_page_size_is_input_validation_error(
        self, page_size: int
    ) -> None:
        with pytest.raises(ServiceError) as exc_info:
            cursor_from_page_query(PageQuery(page_size=page_size))
        assert exc_info.value.kind is ServiceErrorKind.INPUT_VALIDATION_FAILED
