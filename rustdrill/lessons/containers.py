"""Sequences: arrays and lists, cons lists and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values: MutableSequence[int]) -> MutableSequence[int]:
    """Double every element in place and return the same sequence."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Sequence[int]) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in values]


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(3, Nil())


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values, copying only when something has to change.

    The very same sequence is returned when no element is negative;
    otherwise a new list is returned and the input is left untouched.
    """
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]