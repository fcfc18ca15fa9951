"""A phonebook contact and its coloured display."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from termcolor import colored

_BOLD = ["bold"]


def _bold(text: str, color: str) -> str:
    return colored(text, color, attrs=_BOLD)


@dataclass
class Contact:
    """A person in the phonebook."""

    name: str
    phone: str
    nickname: str
    is_bookmarked: bool = False

    def render(self) -> str:
        """Return the coloured contact card, framed by blank lines."""
        if self.is_bookmarked:
            bookmark = _bold(f"⭐ {self.name} is Bookmarked.", "yellow")
        else:
            bookmark = _bold(f"🔖 {self.name} is not Bookmarked.", "white")
        lines = [
            "",
            _bold("--- Contact Info ---", "white"),
            f"{_bold('👤 NAME    :', 'cyan')} {_bold(self.name, 'cyan')}",
            f"{_bold('📞 PHONE   :', 'green')} {_bold(self.phone, 'green')}",
            f"{_bold('🏷️  NICKNAME :', 'magenta')} {_bold(self.nickname, 'magenta')}",
            bookmark,
            _bold("--------------------", "white"),
            "",
        ]
        return "\n".join(lines)

    def display(self) -> str:
        """Write the contact card to stdout and return it."""
        card = self.render()
        sys.stdout.write(f"{card}\n")
        return card