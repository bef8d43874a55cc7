"""
Application context.

Holds the services, the token codec and the database engine, built once
at startup and stored on ``app.state``. Route dependencies read it back
from the request; nothing is constructed per request.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from inventory_service.application.inventory.contracts import (
    InvoiceService,
    ItemService,
    PersonService,
)
from inventory_service.application.inventory.invoice_service import (
    DefaultInvoiceService,
)
from inventory_service.application.inventory.item_service import DefaultItemService
from inventory_service.application.inventory.person_service import (
    DefaultPersonService,
)
from inventory_service.core.config import Settings
from inventory_service.infrastructure.inventory.database import build_engine
from inventory_service.infrastructure.inventory.invoice_repository import (
    InvoiceRepositoryAdapter,
)
from inventory_service.infrastructure.inventory.item_repository import (
    ItemRepositoryAdapter,
)
from inventory_service.infrastructure.inventory.person_repository import (
    PersonRepositoryAdapter,
)
from inventory_service.shared.security.tokens import TokenCodec

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything a request handler needs, wired once.

    Attributes:
        settings: The settings the context was built from.
        token_codec: Signs and verifies bearer tokens.
        person_service: Person operations.
        item_service: Item operations.
        invoice_service: Invoice and item link operations.
        engine: The pooled database engine. None when the services were
            supplied without one, as in route tests.
    """

    settings: Settings
    token_codec: TokenCodec
    person_service: PersonService
    item_service: ItemService
    invoice_service: InvoiceService
    engine: Optional[AsyncEngine] = None


def build_token_codec(settings: Settings) -> TokenCodec:
    """Build the token codec; raises MissingSecretError without a secret."""
    secret = settings.jwt_secret.get_secret_value() if settings.jwt_secret else None
    return TokenCodec(secret, ttl_seconds=settings.token_ttl_seconds)


def build_context(settings: Settings) -> AppContext:
    """Wire repositories and services around one engine.

    Raises:
        MissingSecretError: No JWT secret is configured.
    """
    token_codec = build_token_codec(settings)
    engine = build_engine(settings)

    persons = PersonRepositoryAdapter(engine)
    items = ItemRepositoryAdapter(engine)
    invoices = InvoiceRepositoryAdapter(engine)

    logger.info("Application context built (max_page_size=%d)", settings.max_page_size)
    return AppContext(
        settings=settings,
        token_codec=token_codec,
        person_service=DefaultPersonService(persons, settings.max_page_size),
        item_service=DefaultItemService(items, settings.max_page_size),
        invoice_service=DefaultInvoiceService(
            invoices, persons, items, settings.max_page_size
        ),
        engine=engine,
    )


def get_context(request: Request) -> AppContext:
    """FastAPI dependency returning the context stored on the app."""
    return request.app.state.context
