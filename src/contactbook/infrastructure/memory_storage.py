"""In-memory implementation of ContactStorage (no file)."""

from contactbook.application.dto import LoadedContacts
from contactbook.domain import Contact


class InMemoryContactStorage:
    """Keeps the last saved list in memory. load() returns None until the first save."""

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._saved: list[Contact] | None = list(contacts) if contacts is not None else None

    @property
    def location(self) -> str:
        return "memory"

    def save(self, contacts: list[Contact]) -> None:
        self._saved = list(contacts)

    def load(self) -> LoadedContacts | None:
        if self._saved is None:
            return None
        return LoadedContacts(contacts=list(self._saved), rejected_lines=[])
