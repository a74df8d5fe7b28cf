"""Unit tests for ContactService. No files; in-memory storage only."""

from contactbook.application import (
    ContactAdded,
    ContactService,
    ContactsDeleted,
    ContactsLoaded,
    ContactsSaved,
    FileMissing,
    Invalid,
    LoadedContacts,
    NoMatch,
    StorageFailed,
)
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactStorage


def _service(storage: InMemoryContactStorage | None = None) -> ContactService:
    return ContactService(storage=storage or InMemoryContactStorage())


def _names(contacts: list[Contact]) -> list[str]:
    return [c.name for c in contacts]


class _FailingStorage:
    location = "broken"

    def save(self, contacts):
        raise PermissionError("read-only")

    def load(self):
        raise OSError("disk gone")


class _CountingStorage(InMemoryContactStorage):
    def __init__(self, contacts=None):
        super().__init__(contacts)
        self.save_calls = 0

    def save(self, contacts):
        super().save(contacts)
        self.save_calls += 1


class _RejectingStorage:
    location = "dirty"

    def save(self, contacts):
        pass

    def load(self):
        return LoadedContacts(
            contacts=[Contact("A", "1", "a@x")],
            rejected_lines=["bad-line"],
        )


def test_add_appends_and_keeps_order() -> None:
    service = _service()
    r1 = service.add_contact("Alice", "1", "a@x")
    assert isinstance(r1, ContactAdded)
    assert r1.contact == Contact("Alice", "1", "a@x")

    service.add_contact("Bob", "2", "b@x")
    assert len(service.list_contacts()) == 2
    assert _names(service.list_contacts()) == ["Alice", "Bob"]


def test_add_with_empty_field_is_invalid() -> None:
    service = _service()
    service.add_contact("Alice", "1", "a@x")

    for fields in (("", "1", "a@x"), ("Bob", "", "b@x"), ("Bob", "2", ""), ("  ", "2", "b@x")):
        r = service.add_contact(*fields)
        assert isinstance(r, Invalid)
        assert "fields" in r.reason.lower()

    assert len(service.list_contacts()) == 1


def test_add_keeps_values_as_entered() -> None:
    service = _service()
    r = service.add_contact(" Bob ", " 1", "b@x ")
    assert isinstance(r, ContactAdded)
    assert service.list_contacts() == [Contact(" Bob ", " 1", "b@x ")]
    assert _names(service.search_contacts("bob")) == [" Bob "]


def test_duplicate_names_allowed() -> None:
    service = _service()
    service.add_contact("Alice", "1", "a@x")
    service.add_contact("Alice", "2", "b@x")
    assert len(service.list_contacts()) == 2


def test_list_returns_copy() -> None:
    service = _service()
    service.add_contact("Alice", "1", "a@x")
    listed = service.list_contacts()
    listed.clear()
    assert len(service.list_contacts()) == 1


def test_empty_store() -> None:
    service = _service()
    assert service.is_empty()
    assert service.list_contacts() == []
    assert service.search_contacts("a") == []


def test_search_case_insensitive_substring() -> None:
    service = _service()
    service.add_contact("Anna", "1", "anna@x")
    service.add_contact("Bob", "2", "bob@x")
    service.add_contact("Juan", "3", "juan@x")

    assert _names(service.search_contacts("an")) == ["Anna", "Juan"]
    assert _names(service.search_contacts("AN")) == ["Anna", "Juan"]
    assert _names(service.search_contacts("bo")) == ["Bob"]
    assert service.search_contacts("zed") == []


def test_search_matches_name_only() -> None:
    service = _service()
    service.add_contact("Carol", "555", "dave@x")
    assert service.search_contacts("dave") == []
    assert service.search_contacts("555") == []


def test_search_empty_term_matches_everything() -> None:
    service = _service()
    service.add_contact("Anna", "1", "anna@x")
    service.add_contact("Bob", "2", "bob@x")
    assert _names(service.search_contacts("")) == ["Anna", "Bob"]


def test_delete_removes_every_exact_match() -> None:
    service = _service()
    service.add_contact("Bob", "1", "a@x")
    service.add_contact("bob", "2", "b@x")
    service.add_contact("Alice", "3", "c@x")

    r = service.delete_contacts("BOB")
    assert isinstance(r, ContactsDeleted)
    assert r.name == "BOB"
    assert service.list_contacts() == [Contact("Alice", "3", "c@x")]


def test_delete_is_exact_not_substring() -> None:
    service = _service()
    service.add_contact("Bobby", "1", "a@x")

    r = service.delete_contacts("bob")
    assert isinstance(r, NoMatch)
    assert r.name == "bob"
    assert len(service.list_contacts()) == 1


def test_save_then_load_into_fresh_service() -> None:
    storage = _CountingStorage()
    service = _service(storage)
    service.add_contact("Alice", "1", "a@x")
    service.add_contact("Bob", "2", "b@x")

    saved = service.save_contacts()
    assert isinstance(saved, ContactsSaved)
    assert saved.count == 2
    assert storage.save_calls == 1

    fresh = _service(storage)
    loaded = fresh.load_contacts()
    assert isinstance(loaded, ContactsLoaded)
    assert loaded.count == 2
    assert loaded.skipped == 0
    assert fresh.list_contacts() == service.list_contacts()


def test_load_replaces_unsaved_additions() -> None:
    storage = InMemoryContactStorage([Contact("Saved", "1", "s@x")])
    service = _service(storage)
    service.add_contact("Unsaved", "2", "u@x")

    service.load_contacts()
    assert _names(service.list_contacts()) == ["Saved"]


def test_load_without_stored_data_keeps_store() -> None:
    service = _service()
    service.add_contact("Alice", "1", "a@x")

    r = service.load_contacts()
    assert isinstance(r, FileMissing)
    assert r.location == "memory"
    assert len(service.list_contacts()) == 1


def test_load_reports_skipped_lines(caplog) -> None:
    service = _service(_RejectingStorage())
    with caplog.at_level("WARNING"):
        r = service.load_contacts()

    assert isinstance(r, ContactsLoaded)
    assert r.count == 1
    assert r.skipped == 1
    assert service.list_contacts() == [Contact("A", "1", "a@x")]
    assert "bad-line" in caplog.text


def test_storage_errors_leave_store_untouched() -> None:
    service = _service(_FailingStorage())
    service.add_contact("Alice", "1", "a@x")

    saved = service.save_contacts()
    assert isinstance(saved, StorageFailed)
    assert saved.location == "broken"
    assert "read-only" in saved.reason

    loaded = service.load_contacts()
    assert isinstance(loaded, StorageFailed)
    assert "disk gone" in loaded.reason

    assert service.list_contacts() == [Contact("Alice", "1", "a@x")]
