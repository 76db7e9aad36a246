"""The contact record shared by the contact viewers and the address book."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PersonContact:
    """A person's name, e-mail address and phone number.

    Every field is optional and starts unset, so a contact can be built
    empty and filled in one property at a time.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None