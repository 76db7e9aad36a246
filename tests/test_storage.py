import pytest

from deskdemos.contact import PersonContact
from deskdemos.storage import (
    file_exists,
    format_line,
    open_contacts,
    parse_line,
    save_contacts,
)


def test_parse_line_reads_three_fields():
    contact = parse_line("Mr Puffin,puffin@example.com,x100,\n")
    assert contact == PersonContact("Mr Puffin", "puffin@example.com", "x100")


def test_parse_line_skips_empty_fields():
    contact = parse_line("Ann,,x100")
    assert contact == PersonContact("Ann", "x100", None)


def test_parse_line_skips_leading_separators():
    contact = parse_line(",,Ann,ann@example.com")
    assert contact == PersonContact("Ann", "ann@example.com", None)


def test_parse_empty_line_gives_empty_contact():
    assert parse_line("") == PersonContact()


def test_parse_line_ignores_extra_fields():
    contact = parse_line("a,b,c,d,e")
    assert contact == PersonContact("a", "b", "c")


def test_format_line_full_contact():
    contact = PersonContact("Ann", "ann@example.com", "x100")
    assert format_line(contact) == "Ann,ann@example.com,x100,\n"


def test_format_line_stops_at_first_unset_field():
    assert format_line(PersonContact(name="Ann", phone="x100")) == "Ann,"
    assert format_line(PersonContact(email="ann@example.com")) == ""


def test_format_then_parse_round_trip():
    contact = PersonContact("Mr Jellyfish", "jelly@example.com", "x200")
    assert parse_line(format_line(contact)) == contact


def test_file_exists(tmp_path):
    path = tmp_path / "contacts.csv"
    assert file_exists(path) is False
    path.write_text("", encoding="utf-8")
    assert file_exists(path) is True


def test_save_and_open_round_trip(tmp_path):
    path = tmp_path / "contacts.csv"
    contacts = [
        PersonContact("Mr Jellyfish", "jelly@example.com", "x200"),
        PersonContact("Mr Puffin", "puffin@example.com", "x100"),
    ]
    save_contacts(contacts, path)
    assert open_contacts(path) == contacts


def test_save_writes_one_line_per_contact(tmp_path):
    path = tmp_path / "contacts.csv"
    contacts = [PersonContact("A", "a@example.com", "x1"), PersonContact("B", "b@example.com", "x2")]
    save_contacts(contacts, path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [format_line(c).rstrip("\n") for c in contacts]


def test_save_replaces_existing_content(tmp_path):
    path = tmp_path / "contacts.csv"
    save_contacts([PersonContact("Old", "old@example.com", "x1")], path)
    save_contacts([PersonContact("New", "new@example.com", "x2")], path)
    assert open_contacts(path) == [PersonContact("New", "new@example.com", "x2")]
    assert [p.name for p in tmp_path.iterdir()] == ["contacts.csv"]


def test_save_empty_list_gives_empty_file(tmp_path):
    path = tmp_path / "contacts.csv"
    save_contacts([], path)
    assert open_contacts(path) == []


def test_open_reads_last_line_without_newline(tmp_path):
    path = tmp_path / "contacts.csv"
    path.write_text("Ann,ann@example.com,x100", encoding="utf-8")
    assert open_contacts(path) == [PersonContact("Ann", "ann@example.com", "x100")]


def test_open_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        open_contacts(tmp_path / "missing.csv")


def test_save_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_contacts([PersonContact("Ann")], tmp_path / "nope" / "contacts.csv")