"""An in-memory phonebook keyed by unique phone numbers."""

from __future__ import annotations

import re
from collections.abc import Iterator

from pocketbook.contact import Contact

_INDEX = re.compile(r"\+?[0-9]+")


class DuplicateContactError(ValueError):
    """Raised when adding a contact whose phone number is already stored."""

    def __init__(self, phone: str) -> None:
        super().__init__(f"Contact with number: '{phone}' already in the phonebook.")
        self.phone = phone


class Phonebook:
    """An ordered collection of contacts with unique phone numbers."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def add(self, contact: Contact) -> None:
        """Add a contact and show it; raise if its phone number is taken."""
        if any(existing.phone == contact.phone for existing in self._contacts):
            raise DuplicateContactError(contact.phone)
        print()
        print("Contact added to the phonebook:")
        contact.display()
        self._contacts.append(contact)

    def get(self, index: int) -> Contact | None:
        """Return the contact at index, or None if there is none."""
        if 0 <= index < len(self._contacts):
            return self._contacts[index]
        return None

    def indexed(self) -> list[tuple[int, Contact]]:
        """Return the contacts paired with their positions."""
        return list(enumerate(self._contacts))

    def remove(self, key: str) -> Contact:
        """Remove a contact by phone number, or else by index given as text.

        Raises IndexError for an index out of range and ValueError when the
        key is neither a stored phone number nor an index.
        """
        for position, contact in enumerate(self._contacts):
            if contact.phone == key:
                del self._contacts[position]
                print(f"✅ Removed contact: '{contact.name}'")
                return contact

        if _INDEX.fullmatch(key):
            index = int(key)
            if index < len(self._contacts):
                removed = self._contacts.pop(index)
                print(f"✅ Removed contact: '{removed.name}' at index {index}")
                return removed
            raise IndexError(f"⚠️ No contact at position: {index}")

        raise ValueError(
            f"Input '{key}' is neither a valid phone number nor a valid index."
        )

    def bookmarked(self) -> list[Contact]:
        """Return the bookmarked contacts in order."""
        return [contact for contact in self._contacts if contact.is_bookmarked]

    def list_bookmarked(self) -> None:
        """Display every bookmarked contact."""
        for contact in self.bookmarked():
            contact.display()