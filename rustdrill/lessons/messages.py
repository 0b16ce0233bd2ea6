"""Messages that change a small piece of state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Ask to quit."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and quit flag updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")