import pytest

from pocketbook.contact import Contact
from pocketbook.phonebook import DuplicateContactError, Phonebook


def create_sample_contact(index):
    return Contact(
        name=f"Person{index}",
        phone=f"555000{index}",
        nickname=f"P{index}",
        is_bookmarked=False,
    )


def test_add_contact():
    pb = Phonebook()
    pb.add(create_sample_contact(1))
    assert len(pb) == 1


def test_add_duplicate_phone():
    pb = Phonebook()
    contact1 = create_sample_contact(1)
    contact2 = Contact("Other", contact1.phone, "OtherNick", False)
    pb.add(contact1)
    with pytest.raises(DuplicateContactError) as info:
        pb.add(contact2)
    assert info.value.phone == contact1.phone
    assert len(pb) == 1


def test_remove_by_phone():
    pb = Phonebook()
    contact = create_sample_contact(0)
    pb.add(contact)
    removed = pb.remove(contact.phone)
    assert removed == contact
    assert len(pb) == 0


def test_remove_by_index():
    pb = Phonebook()
    pb.add(create_sample_contact(0))
    removed = pb.remove("0")
    assert removed.name == "Person0"
    assert len(pb) == 0


def test_remove_prefers_phone_over_index():
    pb = Phonebook()
    pb.add(create_sample_contact(0))
    pb.add(Contact("Digits", "0", "D"))
    removed = pb.remove("0")
    assert removed.name == "Digits"
    assert [c.name for c in pb] == ["Person0"]


def test_remove_invalid_input():
    pb = Phonebook()
    pb.add(create_sample_contact(0))
    with pytest.raises(ValueError):
        pb.remove("not_a_number")
    assert len(pb) == 1


def test_get_mutable_contact():
    pb = Phonebook()
    pb.add(create_sample_contact(1))
    contact = pb.get(0)
    contact.is_bookmarked = True
    assert list(pb)[0].is_bookmarked


def test_get_out_of_range():
    pb = Phonebook()
    pb.add(create_sample_contact(1))
    assert pb.get(5) is None
    assert pb.get(-1) is None


def test_remove_from_empty_phonebook():
    pb = Phonebook()
    with pytest.raises(IndexError):
        pb.remove("0")


def test_remove_out_of_bounds_index():
    pb = Phonebook()
    pb.add(create_sample_contact(0))
    with pytest.raises(IndexError):
        pb.remove("99")
    assert len(pb) == 1


def test_bookmark_listing():
    pb = Phonebook()
    c1 = create_sample_contact(1)
    c2 = create_sample_contact(2)
    c1.is_bookmarked = True
    pb.add(c1)
    pb.add(c2)
    assert pb.bookmarked() == [c1]


def test_list_bookmarked_displays_only_bookmarked(capsys):
    pb = Phonebook()
    c1 = create_sample_contact(1)
    c1.is_bookmarked = True
    pb.add(c1)
    pb.add(create_sample_contact(2))
    capsys.readouterr()
    pb.list_bookmarked()
    out = capsys.readouterr().out
    assert "Person1" in out
    assert "Person2" not in out


def test_indexed_pairs_positions():
    pb = Phonebook()
    contacts = [create_sample_contact(i) for i in range(3)]
    for contact in contacts:
        pb.add(contact)
    assert pb.indexed() == list(enumerate(contacts))