import copy

import pytest

from pocketbook.car import Car, main


def test_describe_mentions_name_and_speed():
    car = Car("Fiat 500", 40)
    assert car.describe() == "Fiat 500 is flying at 40 km/h!"


def test_drive_prints_description(capsys):
    car = Car("Roadster", 120)
    car.drive()
    assert capsys.readouterr().out == car.describe() + "\n"


def test_copy_is_equal_but_independent():
    car = Car("Roadster", 120)
    duplicate = copy.copy(car)
    assert duplicate == car
    duplicate.name = "Other"
    assert car.name == "Roadster"


def test_negative_speed_rejected():
    with pytest.raises(ValueError):
        Car("Broken", -1)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == lines[2]
    assert lines[1] == "Copy name: 'Fiat 500' and speed: 40 km/h."
    assert len(lines) == 3