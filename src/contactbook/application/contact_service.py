"""Contact add, list, search, delete, and whole-list save/load."""

import logging

from contactbook.application.dto import (
    ContactAdded,
    ContactsDeleted,
    ContactsLoaded,
    ContactsSaved,
    FileMissing,
    Invalid,
    NoMatch,
    StorageFailed,
)
from contactbook.application.ports import ContactStorage
from contactbook.domain import Contact

logger = logging.getLogger(__name__)


class ContactService:
    """Owns the in-memory contact list. Order is insertion order; no ids beyond position."""

    def __init__(self, storage: ContactStorage) -> None:
        self._storage = storage
        self._contacts: list[Contact] = []

    def is_empty(self) -> bool:
        return not self._contacts

    def add_contact(self, name: str, phone: str, email: str) -> ContactAdded | Invalid:
        """Append a contact. All three fields are required; values are stored as entered."""
        name = name or ""
        phone = phone or ""
        email = email or ""
        if not name.strip() or not phone.strip() or not email.strip():
            return Invalid(reason="All fields must be filled.")

        contact = Contact(name=name, phone=phone, email=email)
        self._contacts.append(contact)
        return ContactAdded(contact=contact)

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        return list(self._contacts)

    def search_contacts(self, term: str) -> list[Contact]:
        """Return contacts whose name contains term (case-insensitive, partial)."""
        needle = (term or "").lower()
        return [c for c in self._contacts if needle in c.name.lower()]

    def delete_contacts(self, name: str) -> ContactsDeleted | NoMatch:
        """Remove every contact whose name equals name, ignoring case."""
        target = (name or "").lower()
        kept = [c for c in self._contacts if c.name.lower() != target]
        if len(kept) == len(self._contacts):
            return NoMatch(name=name)
        self._contacts = kept
        return ContactsDeleted(name=name)

    def save_contacts(self) -> ContactsSaved | StorageFailed:
        """Write the whole list to storage, replacing what was there."""
        location = self._storage.location
        try:
            self._storage.save(list(self._contacts))
        except OSError as e:
            logger.error("Error saving contacts to %s: %s", location, e)
            return StorageFailed(location=location, reason=str(e))
        logger.info("Saved %d contacts to %s", len(self._contacts), location)
        return ContactsSaved(location=location, count=len(self._contacts))

    def load_contacts(self) -> ContactsLoaded | FileMissing | StorageFailed:
        """Replace the in-memory list with what storage holds. Unsaved additions are lost."""
        location = self._storage.location
        try:
            loaded = self._storage.load()
        except OSError as e:
            logger.error("Error loading contacts from %s: %s", location, e)
            return StorageFailed(location=location, reason=str(e))
        if loaded is None:
            logger.info("No contacts file at %s", location)
            return FileMissing(location=location)

        for line in loaded.rejected_lines:
            logger.warning("Skipping invalid line in %s: %r", location, line)
        self._contacts = list(loaded.contacts)
        logger.info(
            "Loaded %d contacts from %s (%d skipped)",
            len(self._contacts),
            location,
            len(loaded.rejected_lines),
        )
        return ContactsLoaded(
            location=location,
            count=len(self._contacts),
            skipped=len(loaded.rejected_lines),
        )
