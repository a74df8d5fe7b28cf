"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import (
    ContactAdded,
    ContactsDeleted,
    ContactsLoaded,
    ContactsSaved,
    FileMissing,
    Invalid,
    LoadedContacts,
    NoMatch,
    StorageFailed,
)
from contactbook.application.ports import ContactStorage

__all__ = [
    "ContactAdded",
    "ContactService",
    "ContactStorage",
    "ContactsDeleted",
    "ContactsLoaded",
    "ContactsSaved",
    "FileMissing",
    "Invalid",
    "LoadedContacts",
    "NoMatch",
    "StorageFailed",
]
