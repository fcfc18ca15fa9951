"""A small car that can be copied and driven."""

from __future__ import annotations

import copy
import sys
from dataclasses import dataclass


@dataclass
class Car:
    """A named car with a top speed in km/h."""

    name: str
    speed: int

    def __post_init__(self) -> None:
        if self.speed < 0:
            raise ValueError("speed must not be negative")

    def describe(self) -> str:
        """Return the sentence announcing the car's speed."""
        return f"{self.name} is flying at {self.speed} km/h!"

    def drive(self) -> str:
        """Write the car's speed announcement to stdout and return it."""
        message = self.describe()
        sys.stdout.write(f"{message}\n")
        return message


def main(argv: list[str] | None = None) -> int:
    """Drive a car and a copy of it."""
    car = Car("Fiat 500", 40)
    car.drive()

    duplicate = copy.copy(car)
    print(f"Copy name: '{duplicate.name}' and speed: {duplicate.speed} km/h.")
    duplicate.drive()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())