"""
FastAPI router for invoices and the items attached to them.

All routes require a bearer token and delegate to the InvoiceService.
``GET /invoices/{invoice_id}?with_items=true`` returns the invoice
together with its items, ordered by item sequence id.
"""

from fastapi import APIRouter, Depends, Query, status

from inventory_service.application.inventory.contracts import InvoiceService
from inventory_service.application.inventory.dtos import (
    CreateInvoiceCommand,
    PageQuery,
    UpdateInvoiceCommand,
)
from inventory_service.interfaces.inventory.dependencies import (
    get_invoice_service,
    get_page_query,
)
from inventory_service.interfaces.inventory.schemas import (
    AddInvoiceItemRequest,
    CreateInvoiceRequest,
    DeleteResponse,
    ErrorResponse,
    InvoiceItemLinkResponse,
    InvoiceResponse,
    UpdateInvoiceRequest,
)
from inventory_service.shared.security.auth import require_claims
from inventory_service.shared.security.tokens import Claims

router = APIRouter(
    prefix="/invoices",
    tags=["invoices"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[InvoiceResponse], summary="List invoices")
async def list_invoices(
    query: PageQuery = Depends(get_page_query),
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> list[InvoiceResponse]:
    invoices = await service.list_page(query, claims)
    return [InvoiceResponse.model_validate(invoice) for invoice in invoices]


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an invoice",
)
async def create_invoice(
    request: CreateInvoiceRequest,
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    command = CreateInvoiceCommand(
        user_id=request.user_id, total=request.total, paid=request.paid
    )
    invoice = await service.create(command, claims)
    return InvoiceResponse.model_validate(invoice)


@router.get(
    "/person/{person_id}",
    response_model=list[InvoiceResponse],
    summary="List the invoices of a person",
)
async def list_invoices_for_person(
    person_id: str,
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> list[InvoiceResponse]:
    invoices = await service.find_by_user(person_id, claims)
    return [InvoiceResponse.model_validate(invoice) for invoice in invoices]


@router.get("/{invoice_id}", response_model=InvoiceResponse, summary="Get an invoice")
async def get_invoice(
    invoice_id: str,
    with_items: bool = Query(False, description="Include the attached items"),
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    invoice = await service.get(invoice_id, claims, with_items=with_items)
    return InvoiceResponse.model_validate(invoice)


@router.put(
    "/{invoice_id}", response_model=InvoiceResponse, summary="Replace an invoice"
)
async def update_invoice(
    invoice_id: str,
    request: UpdateInvoiceRequest,
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceResponse:
    command = UpdateInvoiceCommand(id=request.id, total=request.total, paid=request.paid)
    invoice = await service.update(invoice_id, command, claims)
    return InvoiceResponse.model_validate(invoice)


@router.delete(
    "/{invoice_id}", response_model=DeleteResponse, summary="Delete an invoice"
)
async def delete_invoice(
    invoice_id: str,
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> DeleteResponse:
    result = await service.delete(invoice_id, claims)
    return DeleteResponse.model_validate(result)


@router.get(
    "/{invoice_id}/items",
    response_model=list[InvoiceItemLinkResponse],
    summary="List the item links of an invoice",
)
async def list_invoice_items(
    invoice_id: str,
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> list[InvoiceItemLinkResponse]:
    links = await service.list_item_links(invoice_id, claims)
    return [InvoiceItemLinkResponse.model_validate(link) for link in links]


@router.post(
    "/{invoice_id}/items",
    response_model=InvoiceItemLinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    summary="Attach an item to an invoice",
)
async def add_invoice_item(
    invoice_id: str,
    request: AddInvoiceItemRequest,
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceItemLinkResponse:
    link = await service.add_item(invoice_id, request.item_id, claims)
    return InvoiceItemLinkResponse.model_validate(link)


@router.delete(
    "/{invoice_id}/items/{item_id}",
    response_model=DeleteResponse,
    summary="Detach an item from an invoice",
)
async def remove_invoice_item(
    invoice_id: str,
    item_id: str,
    claims: Claims = Depends(require_claims),
    service: InvoiceService = Depends(get_invoice_service),
) -> DeleteResponse:
    result = await service.remove_item(invoice_id, item_id, claims)
    return DeleteResponse.model_validate(result)
