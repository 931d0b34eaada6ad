"""Terminal text styles: colours and the attributes that go with them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union


def _painted(colour: AnyColour) -> Style:
    return Style(foreground=colour)


class Colour(Enum):
    """The eight basic terminal colours, valued by their ANSI index."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7

    def normal(self) -> Style:
        """A style with this colour as the foreground and nothing else."""
        return _painted(self)

    def bold(self) -> Style:
        """A bold style with this colour as the foreground."""
        return _painted(self).bold()

    def underline(self) -> Style:
        """An underlined style with this colour as the foreground."""
        return _painted(self).underline()

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground on the given background colour."""
        return _painted(self).on(background)


def _check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Fixed:
    """One of the 256 colours of the extended terminal palette."""

    number: int

    def __post_init__(self) -> None:
        _check_byte("number", self.number)

    def normal(self) -> Style:
        """A style with this colour as the foreground and nothing else."""
        return _painted(self)

    def bold(self) -> Style:
        """A bold style with this colour as the foreground."""
        return _painted(self).bold()

    def underline(self) -> Style:
        """An underlined style with this colour as the foreground."""
        return _painted(self).underline()

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground on the given background colour."""
        return _painted(self).on(background)


@dataclass(frozen=True)
class RGB:
    """A 24-bit true colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)

    def normal(self) -> Style:
        """A style with this colour as the foreground and nothing else."""
        return _painted(self)

    def bold(self) -> Style:
        """A bold style with this colour as the foreground."""
        return _painted(self).bold()

    def underline(self) -> Style:
        """An underlined style with this colour as the foreground."""
        return _painted(self).underline()

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground on the given background colour."""
        return _painted(self).on(background)


AnyColour = Union[Colour, Fixed, RGB]


@dataclass(frozen=True)
class Style:
    """An immutable set of colours and text attributes.

    Every modifier returns a new style; the default style is plain text.
    """

    foreground: Optional[AnyColour] = None
    background: Optional[AnyColour] = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    def blink(self) -> Style:
        return replace(self, is_blink=True)

    def reverse(self) -> Style:
        return replace(self, is_reverse=True)

    def hidden(self) -> Style:
        return replace(self, is_hidden=True)

    def strikethrough(self) -> Style:
        return replace(self, is_strikethrough=True)

    def fg(self, colour: AnyColour) -> Style:
        """This style with the given foreground colour."""
        return replace(self, foreground=colour)

    def on(self, colour: AnyColour) -> Style:
        """This style with the given background colour."""
        return replace(self, background=colour)