"""Quizzes: a string transforming machine and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

_U8_MAX = 255


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" count times."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must not be negative")


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(count=count):
                output.append(text + "bar" * count)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


def as_letter(grade: float) -> str:
    """Letter for a numeric grade: F- for 0.0 to 1.0, A+ for anything else."""
    return "F-" if 0.0 <= grade <= 1.0 else "A+"


def _format_grade(grade: float) -> str:
    if grade != grade:
        return "NaN"
    if grade in (float("inf"), float("-inf")):
        return "inf" if grade > 0 else "-inf"
    text = format(Decimal(repr(float(grade))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class ReportCard:
    """A student's grade, shown as a number or as a letter."""

    grade: float
    student_name: str
    student_age: int
    as_string: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= _U8_MAX:
            raise ValueError("student_age must be within 0..=255")

    def render(self) -> str:
        """One line describing the student's achievement."""
        shown = as_letter(self.grade) if self.as_string else _format_grade(self.grade)
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {shown}"