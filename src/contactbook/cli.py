"""
Console menu: numbered options over stdin/stdout, backed by ContactService.
Run: python -m contactbook (from repo root, with .env or env vars set).
"""

import logging
from collections.abc import Callable

from contactbook.application import (
    ContactAdded,
    ContactService,
    ContactsDeleted,
    ContactsLoaded,
    ContactsSaved,
    FileMissing,
    Invalid,
    NoMatch,
    StorageFailed,
)
from contactbook.config import configure_logging, get_contacts_path, load_env
from contactbook.domain import Contact
from contactbook.infrastructure import FileContactStorage

logger = logging.getLogger(__name__)

EXIT_CHOICE = 7

MENU = """
--- Contact Manager Menu ---
1. Add New Contact
2. View All Contacts
3. Search Contact by Name
4. Delete Contact by Name
5. Save Contacts to File
6. Load Contacts from File
7. Exit"""

ReadLine = Callable[[str], str]


def _print_numbered(contacts: list[Contact]) -> None:
    for i, contact in enumerate(contacts, start=1):
        print(f"{i}. {contact}")


def add_contact(service: ContactService, read_line: ReadLine) -> None:
    print("\n--- Add New Contact ---")
    name = read_line("Enter Name: ")
    phone = read_line("Enter Phone: ")
    email = read_line("Enter Email: ")
    result = service.add_contact(name, phone, email)
    if isinstance(result, ContactAdded):
        print("Contact added successfully!")
    elif isinstance(result, Invalid):
        print(f"Error: {result.reason} Contact not added.")


def view_contacts(service: ContactService) -> None:
    print("\n--- All Contacts ---")
    contacts = service.list_contacts()
    if not contacts:
        print("No contacts available. Add some first!")
        return
    _print_numbered(contacts)


def search_contacts(service: ContactService, read_line: ReadLine) -> None:
    print("\n--- Search Contact ---")
    term = read_line("Enter name or part of name to search: ")
    found = service.search_contacts(term)
    if not found:
        print(f"No contacts found matching '{term}'.")
        return
    print("--- Found Contacts ---")
    _print_numbered(found)


def delete_contacts(service: ContactService, read_line: ReadLine) -> None:
    print("\n--- Delete Contact ---")
    if service.is_empty():
        print("No contacts to delete.")
        return
    name = read_line("Enter the name of the contact to delete: ")
    result = service.delete_contacts(name)
    if isinstance(result, ContactsDeleted):
        print(f"Contact(s) named '{result.name}' deleted successfully!")
    elif isinstance(result, NoMatch):
        print(f"No contact found with the exact name '{result.name}'.")


def save_contacts(service: ContactService) -> None:
    result = service.save_contacts()
    if isinstance(result, ContactsSaved):
        print(f"Contacts saved to {result.location} successfully!")
    elif isinstance(result, StorageFailed):
        print(f"Error saving contacts to file: {result.reason}")


def load_contacts(service: ContactService) -> None:
    result = service.load_contacts()
    if isinstance(result, ContactsLoaded):
        if result.skipped:
            print(f"Skipped {result.skipped} invalid line(s) in {result.location}.")
        print(f"Contacts loaded from {result.location} successfully!")
    elif isinstance(result, FileMissing):
        print("No existing contacts file found. Starting with an empty list.")
    elif isinstance(result, StorageFailed):
        print(f"Error loading contacts from file: {result.reason}")


def handle_choice(service: ContactService, choice: int, read_line: ReadLine) -> bool:
    """Run one menu option. Returns False when the user chose Exit."""
    if choice == 1:
        add_contact(service, read_line)
    elif choice == 2:
        view_contacts(service)
    elif choice == 3:
        search_contacts(service, read_line)
    elif choice == 4:
        delete_contacts(service, read_line)
    elif choice == 5:
        save_contacts(service)
    elif choice == 6:
        load_contacts(service)
    elif choice == EXIT_CHOICE:
        return False
    else:
        print(f"Invalid choice. Please enter a number between 1 and {EXIT_CHOICE}.")
    return True


def run_menu(service: ContactService, read_line: ReadLine = input) -> None:
    """Show the menu until the user picks Exit or input ends. Never saves on exit."""
    try:
        while True:
            print(MENU)
            try:
                # UnicodeDecodeError from undecodable stdin is a ValueError too
                choice = int(read_line("Enter your choice: ").strip())
            except ValueError:
                print("Invalid input. Please enter a number.")
                continue
            try:
                if not handle_choice(service, choice, read_line):
                    break
            except UnicodeDecodeError:
                print("Invalid input. Nothing was changed.")
    except EOFError:
        # Ctrl-D or piped input ran out
        logger.info("End of input, leaving menu")
        print()
    print("Exiting Contact Management System. Goodbye!")


def start(service: ContactService, read_line: ReadLine = input) -> None:
    """Load once from storage, then hand over to the menu."""
    print("Contact Management System Initialized.")
    load_contacts(service)
    run_menu(service, read_line)


def main() -> None:
    load_env()
    configure_logging()
    path = get_contacts_path()
    logger.info("Using contacts file %s", path)
    start(ContactService(FileContactStorage(path)))
