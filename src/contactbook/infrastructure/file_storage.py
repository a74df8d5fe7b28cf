"""Comma-delimited text file implementation of ContactStorage.

One contact per line as ``name,phone,email``. No header and no quoting: a comma
inside name or phone shifts the fields, and anything after the second comma is
read back as the email verbatim.
"""

from pathlib import Path

from contactbook.application.dto import LoadedContacts
from contactbook.domain import Contact

FIELD_SEPARATOR = ","


def format_line(contact: Contact) -> str:
    return FIELD_SEPARATOR.join((contact.name, contact.phone, contact.email))


def parse_line(line: str) -> Contact | None:
    """Return the contact on this line, or None if it does not split into 3 parts."""
    parts = line.split(FIELD_SEPARATOR, 2)
    if len(parts) != 3:
        return None
    return Contact(name=parts[0], phone=parts[1], email=parts[2])


class FileContactStorage:
    """Reads and writes the whole contact list to a single text file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def location(self) -> str:
        return str(self._path)

    def save(self, contacts: list[Contact]) -> None:
        with self._path.open("w", encoding="utf-8") as f:
            for contact in contacts:
                f.write(format_line(contact) + "\n")

    def load(self) -> LoadedContacts | None:
        contacts: list[Contact] = []
        rejected: list[str] = []
        try:
            f = self._path.open("r", encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return None
        with f:
            for raw in f:
                line = raw.rstrip("\n")
                contact = parse_line(line)
                if contact is None:
                    rejected.append(line)
                else:
                    contacts.append(contact)
        return LoadedContacts(contacts=contacts, rejected_lines=rejected)
