"""Reading and writing contacts as comma-separated lines."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from .contact import PersonContact

CONTACTS_FILE = "contacts.csv"
_FIELD_COUNT = 3


def parse_line(line: str) -> PersonContact:
    """Build a contact from one line of the contacts file.

    Empty fields are skipped, so the first three non-empty fields become
    name, email and phone in that order. Missing fields stay unset.
    """
    fields: list[str | None] = [field for field in line.rstrip("\r\n").split(",") if field]
    fields.extend([None] * _FIELD_COUNT)
    name, email, phone = fields[:_FIELD_COUNT]
    return PersonContact(name=name, email=email, phone=phone)


def format_line(contact: PersonContact) -> str:
    """Render a contact as one line of the contacts file.

    The line is ``name,email,phone,`` followed by a newline. It ends at the
    first unset field: nothing from that field onwards is written.
    """
    parts = (contact.name, ",", contact.email, ",", contact.phone, ",", "\n")
    pieces: list[str] = []
    for part in parts:
        if part is None:
            break
        pieces.append(part)
    return "".join(pieces)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return whether *path* can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def open_contacts(path: str | os.PathLike[str] = CONTACTS_FILE) -> list[PersonContact]:
    """Read every contact from the file at *path*, one per line.

    Raises ``OSError`` when the file cannot be opened.
    """
    with open(path, encoding="utf-8") as stream:
        return [parse_line(line) for line in stream]


def save_contacts(
    contacts: Iterable[PersonContact],
    path: str | os.PathLike[str] = CONTACTS_FILE,
) -> None:
    """Replace the file at *path* with the given contacts.

    The new content is written beside the target and moved into place, so
    a failed save leaves the old file untouched. Raises ``OSError`` when the
    file cannot be written.
    """
    target = Path(path)
    directory = target.parent if str(target.parent) else Path(".")
    fd, temp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as stream:
            stream.writelines(format_line(contact) for contact in contacts)
        os.replace(temp_name, target)
    except BaseException:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise