"""A factory function that picks the kind of person from the age."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """An ordinary person who greets with name and age."""

    name: str
    age: int

    def say_hello(self) -> str:
        message = f"Hi, my name is {self.name}, age {self.age}"
        print(message)
        return message


@dataclass(frozen=True)
class TiredPerson:
    """A person over a hundred, too tired for a full greeting."""

    name: str
    age: int

    def say_hello(self) -> str:
        message = "I'm a tired person"
        print(message)
        return message


def new_person(name: str, age: int) -> Person | TiredPerson:
    """Return a tired person for ages above 100, an ordinary one otherwise."""
    if age > 100:
        return TiredPerson(name=name, age=age)
    return Person(name=name, age=age)


def main(argv: list[str] | None = None) -> int:
    """Create two people and let them greet."""
    first = new_person("Akshat", 28)
    second = new_person("John", 190)
    first.say_hello()
    second.say_hello()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())