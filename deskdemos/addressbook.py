"""An address book window that keeps its contacts in a CSV file."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .contact import PersonContact
from .storage import CONTACTS_FILE, file_exists, open_contacts, save_contacts

COLUMNS = ("Name", "Email", "Telephone")
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 50


class ContactStore:
    """An ordered list of contacts bound to the file they are saved in."""

    def __init__(
        self,
        contacts: Iterable[PersonContact] = (),
        path: str | os.PathLike[str] = CONTACTS_FILE,
    ) -> None:
        self.path = Path(path)
        self._contacts: list[PersonContact] = list(contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[PersonContact]:
        return iter(self._contacts)

    def __getitem__(self, position: int) -> PersonContact:
        return self._contacts[position]

    def add_contact(self, name: str, email: str, phone: str) -> PersonContact:
        """Append a new contact and save the store.

        The contact stays in the store even when saving fails; the
        ``OSError`` from the save is passed on.
        """
        contact = PersonContact()
        contact.name = name
        contact.email = email
        contact.phone = phone
        self._contacts.append(contact)
        self.save()
        return contact

    def delete(self, position: int) -> PersonContact:
        """Remove the contact at *position* and save the store."""
        if not 0 <= position < len(self._contacts):
            raise IndexError(f"no contact at position {position}")
        removed = self._contacts.pop(position)
        self.save()
        return removed

    def save(self) -> None:
        """Write every contact to the store's file."""
        save_contacts(self._contacts, self.path)


def load_store(path: str | os.PathLike[str] = CONTACTS_FILE) -> ContactStore:
    """Load the contacts saved at *path*, or start an empty store.

    A missing or unreadable file is reported on standard output and gives
    an empty store that will be saved to *path*.
    """
    if not file_exists(path):
        print(f"{Path(path).name} does not exist")
        return ContactStore(path=path)
    try:
        contacts = open_contacts(path)
    except OSError:
        print(f"error: unable to open {Path(path).name}")
        return ContactStore(path=path)
    return ContactStore(contacts, path)


def _cell(value: str | None) -> str:
    return "" if value is None else value


class AddressBookApp:
    """The main window: a table of contacts with buttons to add and delete."""

    def __init__(self, store: ContactStore, root=None) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.store = store
        self.root = root if root is not None else tk.Tk()
        self.root.title("Addressbook")
        self.root.geometry("650x250")

        header = ttk.Frame(self.root)
        header.pack(side=tk.TOP, fill=tk.X)
        ttk.Button(header, text="New Contact", command=self._open_new_contact_dialog).pack(
            side=tk.LEFT
        )
        ttk.Button(header, text="Delete Contact", command=self._delete_selected).pack(
            side=tk.LEFT
        )

        body = ttk.Frame(self.root)
        body.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self._tree = ttk.Treeview(body, columns=COLUMNS, show="headings", selectmode="browse")
        for title in COLUMNS:
            self._tree.heading(title, text=title, anchor=tk.W)
            self._tree.column(title, anchor=tk.W)
        scrollbar = ttk.Scrollbar(body, orient=tk.VERTICAL, command=self._tree.yview)
        self._tree.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self._tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.refresh()

    def _selected_position(self) -> int | None:
        selection = self._tree.selection()
        return int(selection[0]) if selection else None

    def refresh(self) -> None:
        """Redraw the table from the store, keeping a row selected."""
        previous = self._selected_position()
        self._tree.delete(*self._tree.get_children())
        for position, contact in enumerate(self.store):
            self._tree.insert(
                "",
                "end",
                iid=str(position),
                values=(_cell(contact.name), _cell(contact.email), _cell(contact.phone)),
            )
        if len(self.store):
            keep = 0 if previous is None else min(previous, len(self.store) - 1)
            self._tree.selection_set(str(keep))
            self._tree.focus(str(keep))

    def _delete_selected(self) -> None:
        position = self._selected_position()
        if position is None:
            return
        try:
            self.store.delete(position)
        except OSError:
            print(f"error: unable to save {self.store.path.name} file")
        self.refresh()

    def _open_new_contact_dialog(self) -> None:
        import tkinter as tk
        from tkinter import ttk

        dialog = tk.Toplevel(self.root)
        dialog.title("New Contact")
        dialog.minsize(350, 100)

        entries = {}
        for key, title, limit in (
            ("name", "Contact Name", NAME_MAX_LENGTH),
            ("email", "Email", EMAIL_MAX_LENGTH),
            ("phone", "Phone", PHONE_MAX_LENGTH),
        ):
            ttk.Label(dialog, text=title).pack(side=tk.TOP, fill=tk.X)
            check = dialog.register(lambda proposed, limit=limit: len(proposed) <= limit)
            entry = ttk.Entry(dialog, validate="key", validatecommand=(check, "%P"))
            entry.pack(side=tk.TOP, fill=tk.X)
            entries[key] = entry

        def add() -> None:
            try:
                self.store.add_contact(
                    entries["name"].get(), entries["email"].get(), entries["phone"].get()
                )
            except OSError:
                print(f"error: unable to save {self.store.path.name} file")
            self.refresh()
            dialog.destroy()

        ttk.Button(dialog, text="Add Contact", command=add).pack(side=tk.TOP, fill=tk.X)


def main(argv: list[str] | None = None) -> int:
    """Open the address book on the contacts file in the working directory."""
    parser = argparse.ArgumentParser(prog="addressbook", description="A simple address book.")
    parser.parse_args(argv)
    app = AddressBookApp(load_store(CONTACTS_FILE))
    app.root.mainloop()
    return 0