"""
Bulk loader: replace every stored contact with a JSON dataset.

Usage::

    contacts-import [--file contacts.json]
    python -m contacts_api.import_data
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from importlib import resources
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.config import get_settings
from contacts_api.contacts.models import Contact
from contacts_api.contacts.repository import ContactRepository
from contacts_api.contacts.schemas import ContactCreate
from contacts_api.contacts.service import MISSING_FIELDS_MESSAGE, missing_required_fields
from contacts_api.shared.database import DatabaseManager
from contacts_api.shared.exceptions import ValidationError
from contacts_api.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


def load_dataset(path: Path | None = None) -> list[ContactCreate]:
    """Read and validate a JSON array of contacts.

    Args:
        path: Dataset file; defaults to the bundled ``data/contacts.json``.

    Raises:
        ValidationError: If the file is not a list of complete contacts.
    """
    if path is None:
        raw = resources.files("contacts_api").joinpath("data/contacts.json").read_text("utf-8")
    else:
        raw = path.read_text(encoding="utf-8")

    try:
        payload: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Dataset is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise ValidationError("Dataset must be a JSON array of contacts")

    records: list[ContactCreate] = []
    for index, item in enumerate(payload):
        try:
            record = ContactCreate.model_validate(item)
        except PydanticValidationError as exc:
            raise ValidationError(f"Record {index} is invalid: {exc}") from exc
        missing = missing_required_fields(record)
        if missing:
            raise ValidationError(
                f"Record {index}: {MISSING_FIELDS_MESSAGE}",
                details={"index": index, "missing": missing},
            )
        records.append(record)
    return records


async def replace_contacts(session: AsyncSession, records: Sequence[ContactCreate]) -> int:
    """Delete every contact, then insert ``records``, in one transaction.

    Returns:
        Number of inserted contacts.
    """
    repository = ContactRepository(session)
    try:
        removed = await repository.delete_all()
        logger.info("Existing contacts removed", extra={"removed": removed})
        created = await repository.create_bulk(
            [Contact(name=r.name, email=r.email, phone=r.phone) for r in records]
        )
        await session.commit()
    except SQLAlchemyError:
        await session.rollback()
        raise
    logger.info("Contacts imported successfully", extra={"imported": len(created)})
    return len(created)


async def run_import(records: Sequence[ContactCreate], database_url: str | None = None) -> int:
    """Connect to the store, replace its contents and release the engine."""
    db_manager = DatabaseManager(database_url)
    try:
        await db_manager.init_models(create_tables=get_settings().create_tables_on_startup)
        async with db_manager.session() as session:
            return await replace_contacts(session, records)
    finally:
        await db_manager.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="contacts-import",
        description="Replace all stored contacts with a JSON dataset",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="JSON array of {name, email, phone} objects (default: bundled dataset).",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override DATABASE_URL for this run.",
    )
    args = parser.parse_args(argv)

    setup_logging()

    try:
        records = load_dataset(args.file)
        asyncio.run(run_import(records, args.database_url))
    except (ValidationError, OSError, ValueError, SQLAlchemyError) as exc:
        logger.error("Error importing data", extra={"error": str(exc)})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
