"""
Service: Persons.

Input: person commands and page queries, plus the caller's Claims.
Output: Person entities or a DeleteResult.
Side effects: writes through the PersonRepository port.
Failure cases: ServiceError (input validation, not found, invalid
identifier, duplicate email, unexpected storage failure).
"""

import logging
from typing import Optional

from inventory_service.application.inventory.contracts import PersonService
from inventory_service.application.inventory.conversions import person_from_row
from inventory_service.application.inventory.dtos import (
    CreatePersonCommand,
    PageQuery,
    UpdatePersonCommand,
)
from inventory_service.application.inventory.errors import repository_errors
from inventory_service.application.inventory.validation import (
    PersonFields,
    cursor_from_page_query,
    ensure_matching_ids,
    normalize_email,
    validate_fields,
)
from inventory_service.domain.inventory.entities import DeleteResult, Person
from inventory_service.domain.inventory.pagination import MAX_PAGE_SIZE
from inventory_service.domain.inventory.ports import PersonRepository
from inventory_service.shared.security.tokens import Claims

logger = logging.getLogger(__name__)


class DefaultPersonService(PersonService):
    """Validates person input and delegates storage to the repository.

    Emails are lower-cased before they are stored, so the unique
    constraint on ``persons.email`` behaves case-insensitively.
    """

    def __init__(
        self, repository: PersonRepository, max_page_size: int = MAX_PAGE_SIZE
    ) -> None:
        self._repository = repository
        self._max_page_size = max_page_size

    async def create(self, command: CreatePersonCommand, claims: Claims) -> Person:
        fields = validate_fields(
            PersonFields, name=command.name, email=normalize_email(command.email)
        )
        logger.info("Creating person on behalf of %s", claims.subject)
        with repository_errors():
            row = await self._repository.create(
                fields.name, str(fields.email), claims.subject
            )
        return person_from_row(row)

    async def get(self, person_id: str, claims: Claims) -> Person:
        with repository_errors():
            row = await self._repository.get_by_external_id(person_id)
        return person_from_row(row)

    async def list_page(
        self, query: Optional[PageQuery], claims: Claims
    ) -> list[Person]:
        cursor = cursor_from_page_query(query, self._max_page_size)
        with repository_errors():
            rows = await self._repository.list_page(cursor)
        return [person_from_row(row) for row in rows]

    async def update(
        self, person_id: str, command: UpdatePersonCommand, claims: Claims
    ) -> Person:
        ensure_matching_ids(person_id, command.id)
        fields = validate_fields(
            PersonFields, name=command.name, email=normalize_email(command.email)
        )
        logger.info("Updating person %s on behalf of %s", person_id, claims.subject)
        with repository_errors():
            row = await self._repository.update(
                person_id, fields.name, str(fields.email), claims.subject
            )
        return person_from_row(row)

    async def delete(self, person_id: str, claims: Claims) -> DeleteResult:
        logger.info("Deleting person %s on behalf of %s", person_id, claims.subject)
        with repository_errors():
            await self._repository.delete(person_id)
        return DeleteResult(id=person_id)
