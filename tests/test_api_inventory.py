"""
Tests for the inventory API endpoints.

Tests FastAPI routes with mocked services (and, where storage must not
be touched, a real service over a mocked repository).
Validates authentication, response schemas, and error mapping.
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from inventory_service.application.inventory.contracts import (
    InvoiceService,
    ItemService,
    PersonService,
)
from inventory_service.application.inventory.errors import (
    ServiceError,
    ServiceErrorKind,
)
from inventory_service.application.inventory.person_service import (
    DefaultPersonService,
)
from inventory_service.core.config import Settings
from inventory_service.core.context import AppContext
from inventory_service.domain.inventory.entities import (
    AuditInfo,
    DeleteResult,
    Invoice,
    InvoiceItemLink,
    Item,
    Person,
)
from inventory_service.domain.inventory.ports import PersonRepository
from inventory_service.main import create_app
from inventory_service.shared.security.headers import SECURE_HEADERS
from inventory_service.shared.security.tokens import TokenCodec

SECRET = "api-test-secret"
NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
AUDIT = AuditInfo(created_by="tester", created_at=NOW, changed_by="tester", updated_at=NOW)


def _person(seq: int = 1) -> Person:
    return Person(
        seq=seq,
        id=str(uuid4()),
        name="Ada Lovelace",
        email="ada@example.com",
        audit_info=AUDIT,
    )


def _item(seq: int = 1) -> Item:
    return Item(
        seq=seq,
        id=str(uuid4()),
        name="Hex bolt",
        description="M8",
        unit_price=Decimal("0.35"),
        audit_info=AUDIT,
    )


def _invoice(items: list[Item] | None = None) -> Invoice:
    return Invoice(
        seq=1,
        id=str(uuid4()),
        user_id=str(uuid4()),
        total=Decimal("10.00"),
        paid=False,
        audit_info=AUDIT,
        items=items or [],
    )


def _build_context(person_service=None) -> AppContext:
    settings = Settings(
        jwt_secret=SECRET,
        auth_client_secret="client-secret",
        database_url="sqlite+aiosqlite:///:memory:",
    )
    return AppContext(
        settings=settings,
        token_codec=TokenCodec(SECRET),
        person_service=person_service or AsyncMock(spec=PersonService),
        item_service=AsyncMock(spec=ItemService),
        invoice_service=AsyncMock(spec=InvoiceService),
    )


@pytest.fixture
def context() -> AppContext:
    return _build_context()


@pytest.fixture
def client(context) -> TestClient:
    return TestClient(create_app(context))


@pytest.fixture
def auth_headers(context) -> dict[str, str]:
    return {"Authorization": f"Bearer {context.token_codec.issue('tester')}"}


class TestAuthentication:
    """Every resource route requires a valid bearer token."""

    def test_missing_header_rejected(self, client) -> None:
        response = client.get("/api/v1/persons")
        assert response.status_code == 400
        assert response.json() == {"status": 400, "error": "Invalid token"}

    def test_non_bearer_header_rejected(self, client) -> None:
        response = client.get(
            "/api/v1/persons", headers={"Authorization": "Basic dXNlcjpwYXNz"}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid token"

    def test_forged_token_rejected(self, client) -> None:
        token = TokenCodec("some-other-secret").issue("mallory")
        response = client.get(
            "/api/v1/items", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 400
        assert response.json() == {"status": 400, "error": "Invalid token"}

    def test_expired_token_rejected(self, client) -> None:
        token = TokenCodec(SECRET, ttl_seconds=1).issue("tester", now=1_000_000)
        response = client.get(
            "/api/v1/invoices", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 400

    def test_claims_reach_the_service(self, client, context, auth_headers) -> None:
        context.person_service.list_page.return_value = []
        client.get("/api/v1/persons", headers=auth_headers)
        claims = context.person_service.list_page.await_args.args[1]
        assert claims.subject == "tester"


class TestPersonsEndpoint:
    """Tests for /api/v1/persons."""

    def test_list_passes_pagination(self, client, context, auth_headers) -> None:
        context.person_service.list_page.return_value = [_person(11), _person(12)]
        response = client.get(
            "/api/v1/persons?last_id=10&page_size=2", headers=auth_headers
        )
        assert response.status_code == 200
        assert [body["seq"] for body in response.json()] == [11, 12]
        query = context.person_service.list_page.await_args.args[0]
        assert query.last_id == 10
        assert query.page_size == 2

    def test_list_defaults_to_ten(self, client, context, auth_headers) -> None:
        context.person_service.list_page.return_value = []
        client.get("/api/v1/persons", headers=auth_headers)
        query = context.person_service.list_page.await_args.args[0]
        assert query.last_id is None
        assert query.page_size == 10

    def test_create_returns_201(self, client, context, auth_headers) -> None:
        person = _person()
        context.person_service.create.return_value = person
        response = client.post(
            "/api/v1/persons",
            json={"name": "Ada Lovelace", "email": "ada@example.com"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == person.id
        assert body["audit_info"]["created_by"] == "tester"

    def test_duplicate_email_returns_409(self, client, context, auth_headers) -> None:
        context.person_service.create.side_effect = ServiceError(
            ServiceErrorKind.UNIQUE_CONSTRAINT_VIOLATION, "Email already registered"
        )
        response = client.post(
            "/api/v1/persons",
            json={"name": "Ada Lovelace", "email": "ada@example.com"},
            headers=auth_headers,
        )
        assert response.status_code == 409
        assert response.json() == {"status": 409, "error": "Email already registered"}

    def test_missing_person_returns_404(self, client, context, auth_headers) -> None:
        context.person_service.get.side_effect = ServiceError(
            ServiceErrorKind.NOT_FOUND, "Person not found"
        )
        response = client.get(f"/api/v1/persons/{uuid4()}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["status"] == 404

    def test_unexpected_failure_hides_details(
        self, client, context, auth_headers
    ) -> None:
        context.person_service.get.side_effect = ServiceError(
            ServiceErrorKind.UNEXPECTED_FAILURE, "connection reset by peer"
        )
        response = client.get(f"/api/v1/persons/{uuid4()}", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"status": 500, "error": "Internal server error"}

    def test_delete_returns_delete_result(self, client, context, auth_headers) -> None:
        person_id = str(uuid4())
        context.person_service.delete.return_value = DeleteResult(id=person_id)
        response = client.delete(f"/api/v1/persons/{person_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"id": person_id, "deleted": True}

    def test_malformed_query_is_400(self, client, auth_headers) -> None:
        response = client.get("/api/v1/persons?page_size=many", headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["status"] == 400


class TestUpdateIdMismatch:
    """Path/body id mismatch is rejected before storage is consulted."""

    def test_mismatch_returns_400_without_storage_call(self) -> None:
        repository = AsyncMock(spec=PersonRepository)
        context = _build_context(person_service=DefaultPersonService(repository))
        client = TestClient(create_app(context))
        headers = {"Authorization": f"Bearer {context.token_codec.issue('tester')}"}

        response = client.put(
            f"/api/v1/persons/{uuid4()}",
            json={"id": str(uuid4()), "name": "Ada Lovelace", "email": "a@example.com"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()["status"] == 400
        repository.update.assert_not_awaited()

    def test_invalid_email_returns_400_without_storage_call(self) -> None:
        repository = AsyncMock(spec=PersonRepository)
        context = _build_context(person_service=DefaultPersonService(repository))
        client = TestClient(create_app(context))
        headers = {"Authorization": f"Bearer {context.token_codec.issue('tester')}"}

        response = client.post(
            "/api/v1/persons",
            json={"name": "Ada Lovelace", "email": "nope"},
            headers=headers,
        )

        assert response.status_code == 400
        repository.create.assert_not_awaited()


class TestItemsEndpoint:
    """Tests for /api/v1/items."""

    def test_get_item(self, client, context, auth_headers) -> None:
        item = _item()
        context.item_service.get.return_value = item
        response = client.get(f"/api/v1/items/{item.id}", headers=auth_headers)
        assert response.status_code == 200
        assert Decimal(response.json()["unit_price"]) == Decimal("0.35")

    def test_invalid_identifier_returns_400(self, client, context, auth_headers) -> None:
        context.item_service.get.side_effect = ServiceError(
            ServiceErrorKind.INVALID_IDENTIFIER, "Invalid identifier: 12"
        )
        response = client.get("/api/v1/items/12", headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"status": 400, "error": "Invalid identifier: 12"}


class TestInvoicesEndpoint:
    """Tests for /api/v1/invoices."""

    def test_get_with_items(self, client, context, auth_headers) -> None:
        invoice = _invoice(items=[_item(1), _item(2)])
        context.invoice_service.get.return_value = invoice
        response = client.get(
            f"/api/v1/invoices/{invoice.id}?with_items=true", headers=auth_headers
        )
        assert response.status_code == 200
        assert [item["seq"] for item in response.json()["items"]] == [1, 2]
        assert context.invoice_service.get.await_args.kwargs["with_items"] is True

    def test_get_without_items_flag(self, client, context, auth_headers) -> None:
        invoice = _invoice()
        context.invoice_service.get.return_value = invoice
        response = client.get(f"/api/v1/invoices/{invoice.id}", headers=auth_headers)
        assert response.json()["items"] == []
        assert context.invoice_service.get.await_args.kwargs["with_items"] is False

    def test_invoices_of_person(self, client, context, auth_headers) -> None:
        context.invoice_service.find_by_user.return_value = [_invoice()]
        person_id = str(uuid4())
        response = client.get(
            f"/api/v1/invoices/person/{person_id}", headers=auth_headers
        )
        assert response.status_code == 200
        assert len(response.json()) == 1
        assert context.invoice_service.find_by_user.await_args.args[0] == person_id

    def test_attach_item(self, client, context, auth_headers) -> None:
        invoice_id, item_id = str(uuid4()), str(uuid4())
        context.invoice_service.add_item.return_value = InvoiceItemLink(
            invoice_id=invoice_id, item_id=item_id
        )
        response = client.post(
            f"/api/v1/invoices/{invoice_id}/items",
            json={"item_id": item_id},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert response.json() == {"invoice_id": invoice_id, "item_id": item_id}

    def test_attach_item_twice_returns_409(
        self, client, context, auth_headers
    ) -> None:
        context.invoice_service.add_item.side_effect = ServiceError(
            ServiceErrorKind.UNIQUE_CONSTRAINT_VIOLATION, "Item already attached"
        )
        response = client.post(
            f"/api/v1/invoices/{uuid4()}/items",
            json={"item_id": str(uuid4())},
            headers=auth_headers,
        )
        assert response.status_code == 409

    def test_detach_item(self, client, context, auth_headers) -> None:
        invoice_id, item_id = str(uuid4()), str(uuid4())
        context.invoice_service.remove_item.return_value = DeleteResult(id=item_id)
        response = client.delete(
            f"/api/v1/invoices/{invoice_id}/items/{item_id}", headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json() == {"id": item_id, "deleted": True}


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client) -> None:
        """All security headers must be present on every response."""
        response = client.get("/api/v1/health")
        for header_name, header_value in SECURE_HEADERS.items():
            assert response.headers[header_name] == header_value

    def test_security_headers_on_errors(self, client) -> None:
        response = client.get("/api/v1/persons")
        assert response.status_code == 400
        assert response.headers["X-Content-Type-Options"] == "nosniff"
