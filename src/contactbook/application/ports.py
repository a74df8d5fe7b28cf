"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.application.dto import LoadedContacts
from contactbook.domain import Contact


class ContactStorage(Protocol):
    """Persists and restores the whole contact list at once."""

    @property
    def location(self) -> str:
        """Human-readable name of where contacts are kept (e.g. the file path)."""
        ...

    def save(self, contacts: list[Contact]) -> None:
        """Overwrite stored contacts with the given list. Raises OSError on failure."""
        ...

    def load(self) -> LoadedContacts | None:
        """Return stored contacts, or None if nothing has been stored yet. Raises OSError on failure."""
        ...
