"""
Contact service: validation and store orchestration for the CRUD routes.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Sequence
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.contacts.models import Contact
from contacts_api.contacts.repository import ContactRepository, ContactRepositoryProtocol
from contacts_api.contacts.schemas import CONTACT_FIELDS, ContactCreate, ContactUpdate
from contacts_api.shared.exceptions import AppError, NotFoundError, StoreError, ValidationError
from contacts_api.shared.logging import get_logger

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "All fields (name, email, phone) are required"
NO_UPDATE_FIELDS_MESSAGE = "At least one field (name, email, or phone) is required to update"
NOT_FOUND_MESSAGE = "Contact not found"
SERVER_ERROR_MESSAGE = "Server error"
UPDATE_ERROR_MESSAGE = "Error updating contact"


def _is_empty(value: str | None) -> bool:
    return not value


def missing_required_fields(payload: BaseModel) -> list[str]:
    """Return the contact fields that are absent or empty in ``payload``."""
    return [field for field in CONTACT_FIELDS if _is_empty(getattr(payload, field, None))]


def supplied_fields(payload: BaseModel) -> dict[str, str]:
    """Return the fields an update actually supplies.

    ``None`` and empty strings count as not supplied, so an update can
    never clear a field.
    """
    return {
        field: getattr(payload, field)
        for field in CONTACT_FIELDS
        if not _is_empty(getattr(payload, field, None))
    }


def parse_contact_id(raw_id: str) -> UUID | None:
    """Parse a path identifier, returning None when it is not a UUID."""
    try:
        return UUID(raw_id)
    except (ValueError, AttributeError, TypeError):
        return None


class ContactService:
    """Service for contact CRUD operations."""

    def __init__(
        self,
        session: AsyncSession,
        contact_repository: ContactRepositoryProtocol | None = None,
    ) -> None:
        """Initialize contact service.

        Args:
            session: Async database session.
            contact_repository: Optional contact repository (for DI).
        """
        self._session = session
        self._contact_repo = contact_repository or ContactRepository(session)

    @asynccontextmanager
    async def _store_operation(
        self,
        operation: str,
        message: str = SERVER_ERROR_MESSAGE,
    ) -> AsyncIterator[None]:
        """Translate store failures into ``StoreError`` after rolling back."""
        try:
            yield
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Contact store operation failed", extra={"operation": operation})
            await self._session.rollback()
            raise StoreError(message=message, error=str(exc)) from exc

    async def _get_existing(self, contact_id: str) -> Contact:
        parsed_id = parse_contact_id(contact_id)
        if parsed_id is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        contact = await self._contact_repo.get_by_id(parsed_id)
        if contact is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return contact

    async def list_contacts(self) -> Sequence[Contact]:
        """Get every stored contact.

        Raises:
            StoreError: If the store cannot be read.
        """
        async with self._store_operation("list"):
            return await self._contact_repo.list_all()

    async def get_contact(self, contact_id: str) -> Contact:
        """Get a single contact.

        Args:
            contact_id: Raw identifier from the request path.

        Raises:
            NotFoundError: If the id is malformed or unknown.
            StoreError: If the store cannot be read.
        """
        async with self._store_operation("get"):
            return await self._get_existing(contact_id)

    async def create_contact(self, payload: ContactCreate) -> Contact:
        """Validate and persist a new contact.

        Args:
            payload: Candidate contact fields.

        Returns:
            The created contact with its generated ID.

        Raises:
            ValidationError: If any of name, email or phone is missing.
            StoreError: If the contact cannot be saved.
        """
        missing = missing_required_fields(payload)
        if missing:
            raise ValidationError(MISSING_FIELDS_MESSAGE, details={"missing": missing})

        async with self._store_operation("create"):
            contact = await self._contact_repo.create(
                Contact(name=payload.name, email=payload.email, phone=payload.phone)
            )
            await self._session.commit()

        logger.info("Contact created", extra={"contact_id": str(contact.id)})
        return contact

    async def update_contact(self, contact_id: str, payload: ContactUpdate) -> Contact:
        """Apply the supplied fields to an existing contact.

        Args:
            contact_id: Raw identifier from the request path.
            payload: Fields to change; omitted fields keep their values.

        Raises:
            ValidationError: If no field is supplied.
            NotFoundError: If the id is malformed or unknown.
            StoreError: If the contact cannot be updated.
        """
        changes = supplied_fields(payload)
        if not changes:
            raise ValidationError(NO_UPDATE_FIELDS_MESSAGE)

        async with self._store_operation("update", message=UPDATE_ERROR_MESSAGE):
            contact = await self._get_existing(contact_id)
            contact = await self._contact_repo.update(contact, changes)
            await self._session.commit()

        logger.info(
            "Contact updated",
            extra={"contact_id": str(contact.id), "fields": sorted(changes)},
        )
        return contact

    async def delete_contact(self, contact_id: str) -> None:
        """Delete a contact.

        Raises:
            NotFoundError: If the id is malformed or unknown.
            StoreError: If the contact cannot be deleted.
        """
        async with self._store_operation("delete"):
            contact = await self._get_existing(contact_id)
            await self._contact_repo.delete(contact)
            await self._session.commit()

        logger.info("Contact deleted", extra={"contact_id": contact_id})
