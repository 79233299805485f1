"""
Contact resource: ORM model, schemas, repository, service and routes.
"""

from contacts_api.contacts.models import Contact

__all__ = ["Contact"]
