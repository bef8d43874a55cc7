"""
Inventory Service: persons, items and invoices over HTTP.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - inventory: Persons, items, invoices and the items attached to invoices.

Layers:
    - domain: Entities, rows, ports (ABCs), storage errors, pagination.
    - application: Services, commands, validation, service errors.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
