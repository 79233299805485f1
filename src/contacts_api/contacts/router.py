"""
API router for contact CRUD operations.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.contacts.schemas import (
    ContactCreate,
    ContactCreatedResponse,
    ContactResponse,
    ContactUpdate,
    ContactUpdatedResponse,
    ErrorResponse,
    MessageResponse,
)
from contacts_api.contacts.service import ContactService
from contacts_api.shared.database import get_db_session

router = APIRouter(prefix="/contacts", tags=["Contacts"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Contact not found"}}
_SERVER_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Server error"}}


def get_contact_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ContactService:
    """Dependency for contact service."""
    return ContactService(session=session)


ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]


@router.get(
    "",
    response_model=list[ContactResponse],
    summary="Get all contacts",
    responses={**_SERVER_ERROR},
)
async def list_contacts(service: ContactServiceDep) -> list[ContactResponse]:
    contacts = await service.list_contacts()
    return [ContactResponse.model_validate(contact) for contact in contacts]


@router.get(
    "/{contact_id}",
    response_model=ContactResponse,
    summary="Get a single contact by ID",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def get_contact(contact_id: str, service: ContactServiceDep) -> ContactResponse:
    contact = await service.get_contact(contact_id)
    return ContactResponse.model_validate(contact)


@router.post(
    "",
    response_model=ContactCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new contact",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Missing required fields"},
        **_SERVER_ERROR,
    },
)
async def create_contact(
    service: ContactServiceDep,
    payload: Annotated[ContactCreate | None, Body()] = None,
) -> ContactCreatedResponse:
    # A missing body means every field is absent.
    contact = await service.create_contact(payload if payload is not None else ContactCreate())
    return ContactCreatedResponse(message="Contact added successfully", contact_id=contact.id)


@router.put(
    "/{contact_id}",
    response_model=ContactUpdatedResponse,
    summary="Update an existing contact by ID",
    description="Only the supplied fields change; omitted, null or empty fields keep their values.",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "No fields to update"},
        **_NOT_FOUND,
        **_SERVER_ERROR,
    },
)
async def update_contact(
    contact_id: str,
    service: ContactServiceDep,
    payload: Annotated[ContactUpdate | None, Body()] = None,
) -> ContactUpdatedResponse:
    contact = await service.update_contact(contact_id, payload if payload is not None else ContactUpdate())
    return ContactUpdatedResponse(
        message="Contact updated successfully",
        contact=ContactResponse.model_validate(contact),
    )


@router.delete(
    "/{contact_id}",
    response_model=MessageResponse,
    summary="Delete a contact by ID",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_contact(contact_id: str, service: ContactServiceDep) -> MessageResponse:
    await service.delete_contact(contact_id)
    return MessageResponse(message="Contact deleted successfully")
