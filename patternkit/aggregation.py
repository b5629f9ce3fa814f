"""Aggregation: a university holds professors that also exist on their own."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Professor:
    """A professor who teaches one subject."""

    name: str
    subject: str

    def teach(self) -> str:
        """Print and return a line saying what the professor teaches."""
        message = f"{self.name} is teaching {self.subject}"
        print(message)
        return message


@dataclass
class University:
    """A university that refers to professors without owning them."""

    name: str
    professors: list[Professor] = field(default_factory=list)

    def add_professor(self, professor: Professor) -> None:
        """Add a professor to the university's staff."""
        self.professors.append(professor)

    def show_professors(self) -> str:
        """Print and return the list of professors."""
        lines = [f"Professors at {self.name}"]
        lines.extend(f" - {professor.name}" for professor in self.professors)
        text = "\n".join(lines)
        print(text)
        return text


def main(argv: list[str] | None = None) -> int:
    """Show a university with two professors and let one of them teach."""
    first = Professor(name="Akshat", subject="Quant Finance")
    second = Professor(name="Alan", subject="Math")
    university = University(name="MIT")
    university.add_professor(first)
    university.add_professor(second)
    university.show_professors()
    first.teach()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())