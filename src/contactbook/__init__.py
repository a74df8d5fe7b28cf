"""
Contact book core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactService), ports (ContactStorage), DTOs.
- infrastructure: adapters (FileContactStorage, InMemoryContactStorage).
"""

from contactbook.application import (
    ContactAdded,
    ContactService,
    ContactsDeleted,
    ContactsLoaded,
    ContactsSaved,
    ContactStorage,
    FileMissing,
    Invalid,
    NoMatch,
    StorageFailed,
)
from contactbook.domain import Contact
from contactbook.infrastructure import FileContactStorage, InMemoryContactStorage

__all__ = [
    "Contact",
    "ContactAdded",
    "ContactService",
    "ContactStorage",
    "ContactsDeleted",
    "ContactsLoaded",
    "ContactsSaved",
    "FileContactStorage",
    "FileMissing",
    "InMemoryContactStorage",
    "Invalid",
    "NoMatch",
    "StorageFailed",
]
