"""Interactive command loop for managing a phonebook."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from termcolor import colored

from pocketbook.contact import Contact
from pocketbook.phonebook import DuplicateContactError, Phonebook

_TITLE = r"""  ____  _                      ____              _
 |  _ \| |__   ___  _ __   ___| __ )  ___   ___ | | __
 | |_) | '_ \ / _ \| '_ \ / _ \  _ \ / _ \ / _ \| |/ /
 |  __/| | | | (_) | | | |  __/ |_) | (_) | (_) |   <
 |_|   |_| |_|\___/|_| |_|\___|____/ \___/ \___/|_|\_\
"""

_COMMANDS = "📘 PHONEBOOK COMMANDS:  ADD  SEARCH  REMOVE  BOOKMARK"
_BACK = {"BACK", "back", "Back"}
_INDEX = re.compile(r"\+?[0-9]+")


def _bold(text: str, color: str) -> str:
    return colored(text, color, attrs=["bold"])


def banner() -> str:
    """Return the welcome banner with the list of commands."""
    return f"{_TITLE}\n{_bold(_COMMANDS, 'white')}"


class PhonebookShell:
    """Reads commands from a text stream and applies them to a phonebook."""

    def __init__(self, phonebook: Phonebook, stdin: TextIO, stdout: TextIO) -> None:
        self.phonebook = phonebook
        self.stdin = stdin
        self.stdout = stdout

    def _say(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")

    def _ask(self, prompt: str) -> str:
        """Prompt and return the trimmed answer; raise EOFError at end of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def run(self) -> None:
        """Process commands until EXIT or the end of input."""
        handlers = {
            "SEARCH": self.search,
            "ADD": self.add_contact,
            "REMOVE": self.remove,
        }
        try:
            while True:
                command = self._ask("Enter Command (Or EXIT):  ")
                key = command.upper()
                if key == "EXIT":
                    self._say(_bold("Exiting Phonebook.", "yellow"))
                    return
                handler = handlers.get(key)
                if handler is None:
                    self._say(f"Uknown Command: {_bold(command, 'yellow')}. Try again!")
                else:
                    handler()
        except EOFError:
            return

    def _ask_required(self, prompt: str, complaint: str) -> str:
        while True:
            answer = self._ask(prompt)
            if answer:
                return answer
            self._say(complaint)

    def _ask_yes_no(self, name: str) -> bool:
        while True:
            answer = self._ask(f"Should '{name}' be bookmarked? (Y/N):  ").lower()
            if answer == "y":
                return True
            if answer == "n":
                return False
            self._say("Invalid choice. Use 'Y' for Yes or 'N' for No.")

    def add_contact(self) -> None:
        """Ask for a new contact's details and add it to the phonebook."""
        name = self._ask_required("Enter Name:  ", "Name cannot be empty.")
        phone = self._ask_required("Enter Phone Number:  ", "Phone Number cannot be empty.")
        nickname = self._ask_required("Enter Nickname:  ", "NickName cannot be empty.")
        bookmarked = self._ask_yes_no(name)
        contact = Contact(name, phone, nickname, bookmarked)
        try:
            self.phonebook.add(contact)
        except DuplicateContactError as error:
            self._say(str(error))

    def search(self) -> None:
        """List contacts and let the user pick ones to view and bookmark."""
        if not len(self.phonebook):
            self._say("PhoneBook is empty.")
            return
        self._say("PhoneBook contacts:")
        for index, contact in self.phonebook.indexed():
            self._say(
                f"{_bold('👤 Name:', 'cyan')} {_bold(contact.name, 'cyan')}  "
                f"{_bold('📇 Index:', 'magenta')} {_bold(str(index), 'magenta')}"
            )
        while True:
            choice = self._ask("Enter Index of Contact to display (or BACK to return):  ")
            if not choice or choice in _BACK:
                return
            if not _INDEX.fullmatch(choice):
                self._say(
                    f"{_bold('Error:', 'red')} "
                    f"{colored('invalid digit found in string', 'red')}"
                )
                return
            contact = self.phonebook.get(int(choice))
            if contact is None:
                continue
            if self._ask_yes_no(contact.name):
                contact.is_bookmarked = True
                self._say(contact.render())
            else:
                self._say("OK. Will not saved as Bookmarked.")

    def remove(self) -> None:
        """List contacts and remove one chosen by index or phone number."""
        if not len(self.phonebook):
            self._say(_bold("PhoneBook is empty.", "yellow"))
            return
        self._say("PhoneBook contacts:")
        for index, contact in self.phonebook.indexed():
            self._say(
                f"{_bold('👤 Name:', 'cyan')} {_bold(contact.name, 'white')}  ::  "
                f"{_bold('📇 Index:', 'magenta')} {_bold(str(index), 'white')}  ::  "
                f"{_bold('📞 Phone:', 'green')} {_bold(contact.phone, 'yellow')}"
            )
        while True:
            choice = self._ask(
                "Enter Index or Number of Contact to Delete (or BACK to return):  "
            )
            if not choice or choice in _BACK:
                return
            try:
                self.phonebook.remove(choice)
            except (IndexError, ValueError) as error:
                self._say(str(error))
            else:
                return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive phonebook on standard input and output."""
    print(banner())
    PhonebookShell(Phonebook(), sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())