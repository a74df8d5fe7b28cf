"""Result objects returned by ContactService. Callers dispatch on type."""

from dataclasses import dataclass

from contactbook.domain import Contact


@dataclass(frozen=True)
class ContactAdded:
    contact: Contact


@dataclass(frozen=True)
class Invalid:
    reason: str


@dataclass(frozen=True)
class ContactsDeleted:
    name: str


@dataclass(frozen=True)
class NoMatch:
    name: str


@dataclass(frozen=True)
class ContactsSaved:
    location: str
    count: int


@dataclass(frozen=True)
class ContactsLoaded:
    location: str
    count: int
    skipped: int = 0


@dataclass(frozen=True)
class FileMissing:
    location: str


@dataclass(frozen=True)
class StorageFailed:
    """A save or load hit an OS-level error. The store was not touched."""

    location: str
    reason: str


@dataclass(frozen=True)
class LoadedContacts:
    """What a storage adapter read: accepted contacts plus the rejected lines."""

    contacts: list[Contact]
    rejected_lines: list[str]
