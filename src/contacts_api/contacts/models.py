"""
SQLAlchemy models for contacts.
"""

from uuid import UUID, uuid4

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from contacts_api.shared.database import Base


class Contact(Base):
    """A stored contact record."""

    __tablename__ = "contacts"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, name={self.name})>"
