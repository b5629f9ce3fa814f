"""Factories that produce employees with a preset position and salary."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    name: str
    position: str
    salary: int

    def __str__(self) -> str:
        return f"{{{self.name} {self.position} {self.salary}}}"


@dataclass(frozen=True)
class EmployeeFactory:
    """Creates employees that share a position and salary."""

    position: str
    salary: int

    def create(self, name: str) -> Employee:
        return Employee(name=name, position=self.position, salary=self.salary)


def employee_factory(position: str, salary: int) -> Callable[[str], Employee]:
    """Return a function that creates employees with the given position and salary."""

    def create(name: str) -> Employee:
        return Employee(name=name, position=position, salary=salary)

    return create


def main(argv: list[str] | None = None) -> int:
    """Create one employee from each of three factories."""
    developers = EmployeeFactory("Developer", 80000)
    managers = EmployeeFactory("Manager", 90000)
    hr = employee_factory("HR", 30000)
    for employee in (developers.create("Akshat"), managers.create("Alice"), hr("Helen")):
        print(employee)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())