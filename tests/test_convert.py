import pytest

from pocketbook.convert import UnknownCommandError, convert, main


def test_up():
    assert convert("up", "rust language") == "RUST LANGUAGE"


def test_down():
    assert convert("down", "HELLO!") == "hello!"


@pytest.mark.parametrize("text", ["abc", "Mixed Case 123", ""])
def test_round_trip_lower(text):
    lowered = text.lower()
    assert convert("down", convert("up", lowered)) == lowered


def test_unknown_command():
    with pytest.raises(UnknownCommandError) as info:
        convert("sideways", "x")
    assert info.value.command == "sideways"
    assert str(info.value) == "Unkown command: sideways"


def test_main_success(capsys):
    assert main(["down", "HELLO!"]) == 0
    assert capsys.readouterr().out == "hello!\n"


@pytest.mark.parametrize("argv", [[], ["up"], ["up", "a", "b"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == "Usage: convert <up | down> text\n"


def test_main_unknown(capsys):
    assert main(["left", "x"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Unkown command: left\n"
    assert captured.out == ""