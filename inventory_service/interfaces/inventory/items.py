"""
FastAPI router for items.

All routes require a bearer token and delegate to the ItemService.
"""

from fastapi import APIRouter, Depends, status

from inventory_service.application.inventory.contracts import ItemService
from inventory_service.application.inventory.dtos import (
    CreateItemCommand,
    PageQuery,
    UpdateItemCommand,
)
from inventory_service.interfaces.inventory.dependencies import (
    get_item_service,
    get_page_query,
)
from inventory_service.interfaces.inventory.schemas import (
    CreateItemRequest,
    DeleteResponse,
    ErrorResponse,
    ItemResponse,
    UpdateItemRequest,
)
from inventory_service.shared.security.auth import require_claims
from inventory_service.shared.security.tokens import Claims

router = APIRouter(
    prefix="/items",
    tags=["items"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[ItemResponse], summary="List items")
async def list_items(
    query: PageQuery = Depends(get_page_query),
    claims: Claims = Depends(require_claims),
    service: ItemService = Depends(get_item_service),
) -> list[ItemResponse]:
    items = await service.list_page(query, claims)
    return [ItemResponse.model_validate(item) for item in items]


@router.post(
    "",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an item",
)
async def create_item(
    request: CreateItemRequest,
    claims: Claims = Depends(require_claims),
    service: ItemService = Depends(get_item_service),
) -> ItemResponse:
    command = CreateItemCommand(
        name=request.name,
        description=request.description,
        unit_price=request.unit_price,
    )
    item = await service.create(command, claims)
    return ItemResponse.model_validate(item)


@router.get("/{item_id}", response_model=ItemResponse, summary="Get an item")
async def get_item(
    item_id: str,
    claims: Claims = Depends(require_claims),
    service: ItemService = Depends(get_item_service),
) -> ItemResponse:
    item = await service.get(item_id, claims)
    return ItemResponse.model_validate(item)


@router.put("/{item_id}", response_model=ItemResponse, summary="Replace an item")
async def update_item(
    item_id: str,
    request: UpdateItemRequest,
    claims: Claims = Depends(require_claims),
    service: ItemService = Depends(get_item_service),
) -> ItemResponse:
    command = UpdateItemCommand(
        id=request.id,
        name=request.name,
        description=request.description,
        unit_price=request.unit_price,
    )
    item = await service.update(item_id, command, claims)
    return ItemResponse.model_validate(item)


@router.delete("/{item_id}", response_model=DeleteResponse, summary="Delete an item")
async def delete_item(
    item_id: str,
    claims: Claims = Depends(require_claims),
    service: ItemService = Depends(get_item_service),
) -> DeleteResponse:
    result = await service.delete(item_id, claims)
    return DeleteResponse.model_validate(result)
