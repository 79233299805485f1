"""
Contact repository for database operations.
"""

from typing import Protocol, Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.contacts.models import Contact


class ContactRepositoryProtocol(Protocol):
    """Protocol for contact repository operations."""

    async def list_all(self) -> Sequence[Contact]:
        """Get every contact."""
        ...

    async def get_by_id(self, contact_id: UUID) -> Contact | None:
        """Get a contact by ID."""
        ...

    async def create(self, contact: Contact) -> Contact:
        """Create a single contact."""
        ...

    async def update(self, contact: Contact, changes: dict[str, str]) -> Contact:
        """Apply field changes to a contact."""
        ...

    async def delete(self, contact: Contact) -> None:
        """Delete a contact."""
        ...

    async def delete_all(self) -> int:
        """Delete every contact."""
        ...

    async def create_bulk(self, contacts: list[Contact]) -> list[Contact]:
        """Create multiple contacts in bulk."""
        ...


class ContactRepository:
    """Repository for contact database operations.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session.
        """
        self._session = session

    async def list_all(self) -> Sequence[Contact]:
        """Get every contact in store order."""
        result = await self._session.execute(select(Contact))
        return result.scalars().all()

    async def get_by_id(self, contact_id: UUID) -> Contact | None:
        """Get a contact by ID.

        Args:
            contact_id: Contact UUID.

        Returns:
            Contact if found, None otherwise.
        """
        stmt = select(Contact).where(Contact.id == contact_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, contact: Contact) -> Contact:
        """Create a single contact.

        Args:
            contact: Contact to create.

        Returns:
            Created contact with ID.
        """
        self._session.add(contact)
        await self._session.flush()
        await self._session.refresh(contact)
        return contact

    async def update(self, contact: Contact, changes: dict[str, str]) -> Contact:
        """Apply field changes to a contact.

        Args:
            contact: Persistent contact to modify.
            changes: Mapping of field name to new value.

        Returns:
            The updated contact.
        """
        for field, value in changes.items():
            setattr(contact, field, value)
        await self._session.flush()
        await self._session.refresh(contact)
        return contact

    async def delete(self, contact: Contact) -> None:
        """Delete a contact.

        Args:
            contact: Persistent contact to remove.
        """
        await self._session.delete(contact)
        await self._session.flush()

    async def delete_all(self) -> int:
        """Delete every contact.

        Returns:
            Number of deleted rows.
        """
        result = await self._session.execute(delete(Contact))
        return result.rowcount or 0

    async def create_bulk(self, contacts: list[Contact]) -> list[Contact]:
        """Create multiple contacts in bulk.

        Args:
            contacts: List of contacts to create.

        Returns:
            List of created contacts with IDs.
        """
        if not contacts:
            return []

        self._session.add_all(contacts)
        await self._session.flush()
        return contacts
