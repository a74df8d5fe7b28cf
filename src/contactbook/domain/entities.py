"""Domain entities: Contact."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    A person's name, phone and email.
    Emptiness is checked by the add flow, not here: contacts read back from a
    file are accepted as they are.
    """

    name: str
    phone: str
    email: str

    def __str__(self) -> str:
        return f"Name: {self.name}, Phone: {self.phone}, Email: {self.email}"
