"""Traffic management that tells people when they become old enough to drive."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class Eligibility(ABC):
    """A rule that decides whether an observer may drive."""

    @abstractmethod
    def is_eligible(self, observer: Person) -> bool:
        """Return True if the observer satisfies the rule."""


class AgeEligibility(Eligibility):
    """Eligible once older than eighteen."""

    def is_eligible(self, observer: Person) -> bool:
        return observer.age > 18


class Person:
    """A person waiting to be allowed to drive."""

    def __init__(self, name: str, age: int, eligibility: Eligibility | None = None) -> None:
        self.name = name
        self._age = age
        self.id = str(random.randint(10, 100))
        self.eligibility = eligibility if eligibility is not None else AgeEligibility()

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, new_age: int) -> None:
        print(f"{self.name} new age set to: {new_age}")
        self._age = new_age

    def notify(self, info: str) -> None:
        """Tell the person about a change in their status."""
        print(info)

    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, age={self._age!r}, id={self.id!r})"


def _remove_first(items: list[Any], target: Any) -> bool:
    position = next((pos for pos, item in enumerate(items) if item is target), None)
    if position is None:
        return False
    del items[position]
    return True


@dataclass
class TrafficManagement:
    """Keeps a list of people and notifies them of their driving eligibility."""

    persons: list[Any] = field(default_factory=list)

    def subscribe(self, *observers: Any) -> None:
        """Start observing the given people."""
        for observer in observers:
            print(f"Observing: {observer.name}")
            self.persons.append(observer)

    def unsubscribe(self, *observers: Any) -> None:
        """Stop observing the given people; one entry is removed per argument."""
        for observer in observers:
            _remove_first(self.persons, observer)

    def notify_all_observers(self) -> list[Person]:
        """Notify every observer and drop those now eligible; return the dropped ones."""
        eligible: list[Person] = []
        for observer in self.persons:
            if isinstance(observer, Person):
                if observer.eligibility.is_eligible(observer):
                    observer.notify(
                        f"Congrats {observer.name}! you're allowed to drive now."
                    )
                    eligible.append(observer)
                else:
                    observer.notify(f"{observer.name} you're not yet eligible to drive")
            else:
                print("Invalid observer type")
        self.unsubscribe(*eligible)
        return eligible


def main(argv: list[str] | None = None) -> int:
    """Notify two people, one of whom becomes eligible later."""
    first = Person("Akshat", 28)
    second = Person("Yashika", 17)
    traffic = TrafficManagement()
    traffic.subscribe(first, second)
    traffic.notify_all_observers()
    second.age = 20
    traffic.notify_all_observers()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())