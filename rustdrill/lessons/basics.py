"""Basic functions and conditionals: prices, comparisons and strings."""

from __future__ import annotations

_BULK_THRESHOLD = 40


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple for orders of more than 40."""
    if apples <= _BULK_THRESHOLD:
        return apples * 2
    return apples


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """Whether num is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """num squared."""
    return num * num


def longest(x: str, y: str) -> str:
    """The string with more UTF-8 bytes; y when they are equally long."""
    if len(x.encode("utf-8")) > len(y.encode("utf-8")):
        return x
    return y