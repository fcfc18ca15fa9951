"""Convert text to upper or lower case from the command line."""

from __future__ import annotations

import sys

USAGE = "Usage: convert <up | down> text"


class UnknownCommandError(ValueError):
    """Raised when the conversion command is neither 'up' nor 'down'."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unkown command: {command}")
        self.command = command


def convert(command: str, text: str) -> str:
    """Return text upper-cased for 'up' or lower-cased for 'down'."""
    if command == "up":
        return text.upper()
    if command == "down":
        return text.lower()
    raise UnknownCommandError(command)


def main(argv: list[str] | None = None) -> int:
    """Run the converter with arguments '<up | down> text'."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    command, text = args
    try:
        print(convert(command, text))
    except UnknownCommandError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())