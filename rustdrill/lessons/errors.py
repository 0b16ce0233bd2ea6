"""Error handling: name tags, token costs and strictly positive integers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_I32_BITS = 32
_I64_BITS = 64


class ParseIntError(ValueError):
    """Text could not be parsed as an integer of the required width."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _parse_signed(text: str, bits: int) -> int:
    """Parse a signed integer of the given width: an optional sign, then ASCII digits."""
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    sign, digits = (text[0], text[1:]) if text[0] in "+-" else ("+", text)
    if not digits or not all("0" <= c <= "9" for c in digits):
        raise ParseIntError("invalid digit found in string")
    value = int(digits)
    if sign == "-":
        value = -value
    if value > 2 ** (bits - 1) - 1:
        raise ParseIntError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ParseIntError("number too small to fit in target type")
    return value


def parse_int(text: str) -> int:
    """Parse a 32-bit signed integer; raise ParseIntError on bad input."""
    return _parse_signed(text, _I32_BITS)


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: five per item plus a fee of one."""
    quantity = parse_int(item_quantity)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2 ** 31) <= cost <= 2 ** 31 - 1:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Spend tokens on the typed quantity and return what is left.

    Raises ParseIntError for a quantity that is not a number and ValueError
    when the cost exceeds the tokens available.
    """
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(Enum):
    """Why a positive non-zero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """Raised when a value is not strictly positive."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed; error holds the ParseIntError or CreationError behind it."""

    def __init__(self, error: ParseIntError | CreationError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and require it to be positive and non-zero."""
    try:
        value = _parse_signed(text, _I64_BITS)
    except ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err