"""
Pydantic schemas for inventory API requests and responses.

Request schemas only fix the shape and types of a body. Field constraints
(lengths, email format, non-negative amounts) are enforced by the services
so that every route reports them the same way.
Response schemas read domain entities directly (``from_attributes``).
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    status: int
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str


class ReadinessResponse(BaseModel):
    status: str
    database: str


class AuditInfoSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    created_by: str
    created_at: datetime
    changed_by: str
    updated_at: datetime


class DeleteResponse(BaseModel):
    """Response schema for every delete endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    deleted: bool


# ------------------------------------------------------------------
# Persons
# ------------------------------------------------------------------


class CreatePersonRequest(BaseModel):
    name: str = Field(..., description="Display name (3-50 characters)")
    email: str = Field(..., description="Unique email address")


class UpdatePersonRequest(BaseModel):
    """Request schema for replacing a person.

    Attributes:
        id: External id of the person. Must match the id in the path.
        name: Display name (3-50 characters).
        email: Unique email address.
    """

    id: str
    name: str
    email: str


class PersonResponse(BaseModel):
    """A person as returned by the API.

    ``seq`` is the value to pass back as ``last_id`` to fetch the next page.
    """

    model_config = ConfigDict(from_attributes=True)

    seq: int
    id: str
    name: str
    email: str
    audit_info: AuditInfoSchema


# ------------------------------------------------------------------
# Items
# ------------------------------------------------------------------


class CreateItemRequest(BaseModel):
    name: str = Field(..., description="Item name (3-50 characters)")
    description: str = Field("", description="Free text, at most 255 characters")
    unit_price: Decimal = Field(..., description="Price per unit, never negative")


class UpdateItemRequest(BaseModel):
    id: str
    name: str
    description: str = ""
    unit_price: Decimal


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    seq: int
    id: str
    name: str
    description: str
    unit_price: Decimal
    audit_info: AuditInfoSchema


# ------------------------------------------------------------------
# Invoices
# ------------------------------------------------------------------


class CreateInvoiceRequest(BaseModel):
    user_id: str = Field(..., description="External id of the owning person")
    total: Decimal = Field(..., description="Invoice total, never negative")
    paid: bool = False


class UpdateInvoiceRequest(BaseModel):
    id: str
    total: Decimal
    paid: bool


class InvoiceResponse(BaseModel):
    """An invoice; ``items`` is only populated when requested."""

    model_config = ConfigDict(from_attributes=True)

    seq: int
    id: str
    user_id: str
    total: Decimal
    paid: bool
    audit_info: AuditInfoSchema
    items: list[ItemResponse] = Field(default_factory=list)


class AddInvoiceItemRequest(BaseModel):
    item_id: str = Field(..., description="External id of the item to attach")


class InvoiceItemLinkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    invoice_id: str
    item_id: str
