"""Shared behaviour: appending "Bar", licensing information and generic wrappers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")

_BAR = "Bar"
_LICENSING_INFO = "Some information"


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_to_str(value: str) -> str:
    return f"{value}{_BAR}"


@append_bar.register(list)
def _append_to_list(value: list) -> list:
    return [*value, _BAR]


class Licensed(ABC):
    """Software that has a version and shares the same licensing information."""

    @abstractmethod
    def version_as_string(self) -> str:
        """The version, as text."""

    def licensing_info(self) -> str:
        """Licensing information, identical for every piece of software."""
        return _LICENSING_INFO


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int

    def version_as_string(self) -> str:
        return str(self.version_number)


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str

    def version_as_string(self) -> str:
        return self.version_number


def compare_license_types(first: Licensed, second: Licensed) -> bool:
    """Whether two pieces of software carry the same licensing information."""
    return first.licensing_info() == second.licensing_info()


class SomeStruct:
    """A value offering two capabilities."""

    def some_function(self) -> bool:
        return True

    def other_function(self) -> bool:
        return True


def some_func(item) -> bool:
    """True when the item reports both capabilities."""
    return item.some_function() and item.other_function()


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T