"""A read-only window listing a fixed set of sample contacts."""

from __future__ import annotations

import argparse

from .contact import PersonContact

COLUMNS = ("Name", "Email", "Telephone")


def create_contact_model() -> list[PersonContact]:
    """Return the sample contacts shown in the window."""
    jellyfish = PersonContact()
    jellyfish.name = "Mr Jellyfish"
    jellyfish.email = "jellyfish@example.com"
    jellyfish.phone = "ext one"

    puffin = PersonContact()
    puffin.name = "Mr Puffin"
    puffin.email = "puffin@example.com"
    puffin.phone = "ext two"

    return [jellyfish, puffin]


def column_values(contact: PersonContact) -> tuple[str, str, str]:
    """Return the text of the Name, Email and Telephone cells for a contact."""
    return tuple("" if value is None else value for value in (contact.name, contact.email, contact.phone))


class ContactsWindow:
    """A window with one row per contact and a column per field."""

    def __init__(self, contacts: list[PersonContact] | None = None, root=None) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.contacts = create_contact_model() if contacts is None else list(contacts)
        self.root = root if root is not None else tk.Tk()
        self.root.title("Contacts")
        self.root.geometry("500x200")

        frame = ttk.Frame(self.root)
        frame.pack(fill=tk.BOTH, expand=True)
        self._tree = ttk.Treeview(frame, columns=COLUMNS, show="headings", selectmode="browse")
        for title in COLUMNS:
            self._tree.heading(title, text=title, anchor=tk.W)
            self._tree.column(title, anchor=tk.W)
        scrollbar = ttk.Scrollbar(frame, orient=tk.VERTICAL, command=self._tree.yview)
        self._tree.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self._tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        for position, contact in enumerate(self.contacts):
            self._tree.insert("", "end", iid=str(position), values=column_values(contact))
        if self.contacts:
            self._tree.selection_set("0")
            self._tree.focus("0")


def main(argv: list[str] | None = None) -> int:
    """Show the sample contacts window."""
    parser = argparse.ArgumentParser(prog="contacts", description="Show sample contacts.")
    parser.parse_args(argv)
    window = ContactsWindow()
    window.root.mainloop()
    return 0