"""
Dependency injection for the inventory bounded context.

Services are wired once into the AppContext at startup; these
dependencies hand them to routes. Routes depend on the service
contracts, never on an implementation.
"""

from typing import Optional

from fastapi import Depends, Query

from inventory_service.application.inventory.contracts import (
    InvoiceService,
    ItemService,
    PersonService,
)
from inventory_service.application.inventory.dtos import PageQuery
from inventory_service.core.context import AppContext, get_context
from inventory_service.domain.inventory.pagination import DEFAULT_PAGE_SIZE


def get_person_service(context: AppContext = Depends(get_context)) -> PersonService:
    return context.person_service


def get_item_service(context: AppContext = Depends(get_context)) -> ItemService:
    return context.item_service


def get_invoice_service(context: AppContext = Depends(get_context)) -> InvoiceService:
    return context.invoice_service


def get_page_query(
    last_id: Optional[int] = Query(
        None, description="Sequence id of the last row of the previous page"
    ),
    page_size: int = Query(DEFAULT_PAGE_SIZE, description="Rows per page"),
) -> PageQuery:
    """Collect the pagination query parameters of a list endpoint."""
    return PageQuery(last_id=last_id, page_size=page_size)
