# pocketbook

A small collection of console tools:

- **pocketbook**: an interactive phonebook in which you add, search,
  bookmark and remove contacts.
- **pocketbook-convert**: converts a piece of text to upper or lower case.
- **pocketbook-car**: a tiny demo that drives a car and a copy of it.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The phonebook

```
pocketbook
```

A banner with the list of commands appears, followed by a prompt. These
commands are accepted, in any letter case:

| Command  | What it does                                                         |
|----------|----------------------------------------------------------------------|
| `ADD`    | Asks for a name, phone number, nickname and whether to bookmark it    |
| `SEARCH` | Lists contacts by index; pick an index to bookmark that contact       |
| `REMOVE` | Lists contacts and removes one by its phone number or by its index    |
| `EXIT`   | Leaves the phonebook                                                 |

The phonebook also stops at the end of input.

- `ADD` re-asks for any field left empty, and re-asks the bookmark question
  until the answer is `Y` or `N`. A contact whose phone number is already in
  the phonebook is not added; a message says so.
- `SEARCH` keeps asking for indexes. Answering `Y` bookmarks the contact and
  shows its card. An empty line or `BACK` returns to the main prompt, and so
  does anything that is not a number. An index with no contact is ignored.
- `REMOVE` first looks for a contact with exactly that phone number, then
  treats the input as an index. It keeps asking until a contact is removed,
  or until an empty line or `BACK` is entered.

### What it does not do

- Contacts live in memory only. Nothing is saved, and the phonebook starts
  empty each time.
- The banner lists `BOOKMARK`, but there is no such command. Entering it is
  reported as an unknown command. Bookmarking is done through `ADD` or
  `SEARCH`.
- There is no search by name. `SEARCH` works by index only.

### Using it from Python

```python
from pocketbook.contact import Contact
from pocketbook.phonebook import DuplicateContactError, Phonebook

book = Phonebook()
book.add(Contact("Ada", "phone-ada", "countess"))   # prints the contact card

try:
    book.add(Contact("Other", "phone-ada", "copy"))
except DuplicateContactError:
    pass

for index, contact in book.indexed():
    print(index, contact.name)

book.get(0).is_bookmarked = True
print([c.name for c in book.bookmarked()])

removed = book.remove("0")   # by index, or by the phone number itself
print(removed.name, len(book))
```

- `Phonebook` supports `len()` and iteration over its contacts.
- `Phonebook.get(index)` returns `None` when there is no contact at that
  index.
- `Phonebook.remove(key)` returns the removed contact. It raises
  `IndexError` for an index out of range. It raises `ValueError` when the
  key is neither a stored phone number nor an index.
- `Phonebook.list_bookmarked()` prints the card of every bookmarked contact.
- `Contact.render()` returns the coloured contact card as text.
  `Contact.display()` prints the card and returns it.

To drive the interactive loop from your own streams, use
`pocketbook.shell.PhonebookShell(phonebook, stdin, stdout).run()`.
`pocketbook.shell.banner()` returns the welcome banner.

## Case conversion

```
pocketbook-convert up "python language"
pocketbook-convert down HELLO!
```

Exactly two arguments are expected: `up` or `down`, then the text. A wrong
number of arguments prints a usage line to standard error and exits with
status 1. So does any other command, with a message naming it.

From Python, `pocketbook.convert.convert("up", "text")` returns the
converted string. It raises `UnknownCommandError`, a `ValueError`, for an
unknown command.

## Car demo

```
pocketbook-car
```

Creates a "Fiat 500" at 40 km/h and drives it. It then makes a copy,
prints the copy's name and speed, and drives the copy.

From Python, `pocketbook.car.Car(name, speed)` raises `ValueError` for a
negative speed. `Car.describe()` returns the driving sentence.
`Car.drive()` prints the sentence and returns it.