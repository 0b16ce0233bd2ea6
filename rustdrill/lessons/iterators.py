"""Iterator exercises: capitalisation, checked division, factorials and progress counts."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character, keeping the rest as it is."""
    if not text:
        return ""
    return text[0].upper()[0] + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them without separators."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Return a / b when b divides a exactly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide the sample numbers by 27, raising at the first failure."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers by 27, keeping each failure in place."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, _DIVISOR))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """num! for an unsigned 64-bit num; the result must fit in 64 bits too."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in an unsigned 64-bit integer")
    return result


class Progress(Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_progress(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """How many entries have the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_progress(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """How many entries across all maps have the given progress."""
    return sum(count_progress(progress_map, value) for progress_map in collection)