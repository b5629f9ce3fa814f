"""Population lookups behind a database abstraction, with a lazily built singleton."""

from __future__ import annotations

import re
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

_INTEGER = re.compile(r"[+-]?[0-9]+")


class PopulationFileError(ValueError):
    """The population file is malformed."""


def _lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_populations(filename: str | Path) -> dict[str, int]:
    """Read alternating lines of capital name and population into a mapping."""
    with open(filename, encoding="utf-8") as handle:
        lines = iter(_lines(handle.read()))
    populations: dict[str, int] = {}
    for capital in lines:
        count = next(lines, None)
        if count is None:
            raise PopulationFileError(f"missing population for capital: {capital}")
        if not _INTEGER.fullmatch(count):
            raise PopulationFileError(f"invalid population for {capital}: {count!r}")
        populations[capital] = int(count)
    return populations


class Database(ABC):
    """Something that knows city populations."""

    @abstractmethod
    def get_population(self, city: str) -> int:
        """Return the population of a city, or 0 if unknown."""


class DummyDatabase(Database):
    """A fixed in-memory database, filled on first use."""

    def __init__(self) -> None:
        self._populations: dict[str, int] = {}

    def get_population(self, city: str) -> int:
        if not self._populations:
            self._populations = {"alpha": 10, "beta": 5, "gamma": 1}
        return self._populations.get(city, 0)


class SingletonDatabase(Database):
    """A database loaded from a population file."""

    def __init__(self, populations: dict[str, int]) -> None:
        self.populations = populations

    def get_population(self, city: str) -> int:
        return self.populations.get(city, 0)


_instance: SingletonDatabase | None = None
_lock = threading.Lock()


def get_singleton_database(path: str | Path = "./population.txt") -> SingletonDatabase:
    """Return the shared database, reading it from ``path`` on the first call only."""
    global _instance
    with _lock:
        if _instance is None:
            try:
                populations = read_populations(path)
            except (OSError, PopulationFileError) as error:
                raise RuntimeError("Error reading file") from error
            _instance = SingletonDatabase(populations)
        return _instance


def total_population(db: Database, cities: Iterable[str]) -> int:
    """Sum the populations of the given cities."""
    return sum(db.get_population(city) for city in cities)


def main(argv: list[str] | None = None) -> int:
    """Check the total population against the dummy database."""
    ok = total_population(DummyDatabase(), ["alpha", "gamma"]) == 11
    print(f"Test pass?: {str(ok).lower()}", end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())