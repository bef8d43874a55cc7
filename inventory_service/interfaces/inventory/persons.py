"""
FastAPI router for persons.

All routes require a bearer token and delegate to the PersonService.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, status

from inventory_service.application.inventory.contracts import PersonService
from inventory_service.application.inventory.dtos import (
    CreatePersonCommand,
    PageQuery,
    UpdatePersonCommand,
)
from inventory_service.interfaces.inventory.dependencies import (
    get_page_query,
    get_person_service,
)
from inventory_service.interfaces.inventory.schemas import (
    CreatePersonRequest,
    DeleteResponse,
    ErrorResponse,
    PersonResponse,
    UpdatePersonRequest,
)
from inventory_service.shared.security.auth import require_claims
from inventory_service.shared.security.tokens import Claims

router = APIRouter(
    prefix="/persons",
    tags=["persons"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[PersonResponse], summary="List persons")
async def list_persons(
    query: PageQuery = Depends(get_page_query),
    claims: Claims = Depends(require_claims),
    service: PersonService = Depends(get_person_service),
) -> list[PersonResponse]:
    persons = await service.list_page(query, claims)
    return [PersonResponse.model_validate(person) for person in persons]


@router.post(
    "",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    summary="Create a person",
)
async def create_person(
    request: CreatePersonRequest,
    claims: Claims = Depends(require_claims),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    command = CreatePersonCommand(name=request.name, email=request.email)
    person = await service.create(command, claims)
    return PersonResponse.model_validate(person)


@router.get("/{person_id}", response_model=PersonResponse, summary="Get a person")
async def get_person(
    person_id: str,
    claims: Claims = Depends(require_claims),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    person = await service.get(person_id, claims)
    return PersonResponse.model_validate(person)


@router.put(
    "/{person_id}",
    response_model=PersonResponse,
    responses={409: {"model": ErrorResponse}},
    summary="Replace a person",
)
async def update_person(
    person_id: str,
    request: UpdatePersonRequest,
    claims: Claims = Depends(require_claims),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Replace a person; the body id must match the path id."""
    command = UpdatePersonCommand(id=request.id, name=request.name, email=request.email)
    person = await service.update(person_id, command, claims)
    return PersonResponse.model_validate(person)


@router.delete("/{person_id}", response_model=DeleteResponse, summary="Delete a person")
async def delete_person(
    person_id: str,
    claims: Claims = Depends(require_claims),
    service: PersonService = Depends(get_person_service),
) -> DeleteResponse:
    result = await service.delete(person_id, claims)
    return DeleteResponse.model_validate(result)
