"""
Pydantic schemas for contact management.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

CONTACT_FIELDS = ("name", "email", "phone")


class ContactCreate(BaseModel):
    """Schema for creating a contact.

    Fields are optional at the schema level so that missing values reach
    the service and are reported with a single 400 message.
    """

    name: str | None = Field(default=None, description="Contact name", examples=["Ann"])
    email: str | None = Field(default=None, description="Contact email", examples=["ann@x.com"])
    phone: str | None = Field(default=None, description="Contact phone", examples=["555-0100"])


class ContactUpdate(BaseModel):
    """Schema for a partial contact update (omit a field to leave it unchanged)."""

    name: str | None = Field(default=None, description="New name")
    email: str | None = Field(default=None, description="New email")
    phone: str | None = Field(default=None, description="New phone")


class ContactResponse(BaseModel):
    """Schema for contact response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    phone: str


class ContactCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    contact_id: UUID = Field(..., alias="contactId")


class ContactUpdatedResponse(BaseModel):
    message: str
    contact: ContactResponse


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Error body shared by every failing route."""

    message: str = Field(..., description="Human readable error message")
    error: str | None = Field(default=None, description="Underlying error detail (server errors only)")
