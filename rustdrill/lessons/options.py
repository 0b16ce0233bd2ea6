"""Optional values: how much ice cream is left."""

from __future__ import annotations

_U16_MAX = 2**16 - 1


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces left at the given hour: 5 before 22, 0 until 24, None past that."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError("time_of_day must fit in an unsigned 16-bit integer")
    if time_of_day < 22:
        return 5
    if time_of_day < 25:
        return 0
    return None