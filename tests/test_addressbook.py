import pytest

from deskdemos.addressbook import ContactStore, load_store
from deskdemos.contact import PersonContact


def test_add_contact_appends_and_saves(tmp_path):
    path = tmp_path / "contacts.csv"
    store = ContactStore(path=path)
    added = store.add_contact("Ann", "ann@example.com", "ext one")
    assert len(store) == 1
    assert store[0] == added
    assert added == PersonContact("Ann", "ann@example.com", "ext one")
    assert path.read_text(encoding="utf-8") == "Ann,ann@example.com,ext one,\n"


def test_round_trip_through_load_store(tmp_path):
    path = tmp_path / "contacts.csv"
    store = ContactStore(path=path)
    store.add_contact("Ann", "ann@example.com", "ext one")
    store.add_contact("Bob", "bob@example.com", "ext two")
    reloaded = load_store(path)
    assert list(reloaded) == list(store)
    assert reloaded.path == path


def test_delete_removes_and_saves(tmp_path):
    path = tmp_path / "contacts.csv"
    store = ContactStore(path=path)
    store.add_contact("Ann", "ann@example.com", "ext one")
    store.add_contact("Bob", "bob@example.com", "ext two")
    removed = store.delete(0)
    assert removed.name == "Ann"
    assert [c.name for c in store] == ["Bob"]
    assert [c.name for c in load_store(path)] == ["Bob"]


@pytest.mark.parametrize("position", [-1, 1, 5])
def test_delete_out_of_range_raises(tmp_path, position):
    store = ContactStore([PersonContact("Ann", "ann@example.com", "ext one")], tmp_path / "c.csv")
    with pytest.raises(IndexError):
        store.delete(position)
    assert len(store) == 1


def test_load_store_missing_file_is_empty(tmp_path, capsys):
    path = tmp_path / "contacts.csv"
    store = load_store(path)
    assert len(store) == 0
    assert store.path == path
    assert capsys.readouterr().out == "contacts.csv does not exist\n"


def test_empty_entries_reload_as_unset(tmp_path):
    path = tmp_path / "contacts.csv"
    store = ContactStore(path=path)
    store.add_contact("", "", "")
    assert path.read_text(encoding="utf-8") == ",,,\n"
    assert list(load_store(path)) == [PersonContact()]


def test_add_contact_keeps_contact_when_save_fails(tmp_path):
    store = ContactStore(path=tmp_path / "missing" / "contacts.csv")
    with pytest.raises(OSError):
        store.add_contact("Ann", "ann@example.com", "ext one")
    assert [c.name for c in store] == ["Ann"]


def test_save_writes_all_contacts_in_order(tmp_path):
    path = tmp_path / "contacts.csv"
    contacts = [
        PersonContact("Ann", "ann@example.com", "ext one"),
        PersonContact("Bob", "bob@example.com", "ext two"),
    ]
    ContactStore(contacts, path).save()
    assert list(load_store(path)) == contacts