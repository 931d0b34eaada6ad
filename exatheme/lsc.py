"""Parsing of LS_COLORS-style strings into named styles."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Optional

from .style import RGB, AnyColour, Colour, Fixed, Style

_ATTRIBUTES = {
    "1": Style.bold,
    "2": Style.dimmed,
    "3": Style.italic,
    "4": Style.underline,
    "5": Style.blink,
    "7": Style.reverse,
    "8": Style.hidden,
    "9": Style.strikethrough,
}

_FOREGROUNDS = {str(30 + colour.value): colour for colour in Colour}
_BACKGROUNDS = {str(40 + colour.value): colour for colour in Colour}


def _parse_byte(text: Optional[str]) -> Optional[int]:
    """Parse an unsigned byte strictly, returning None when it is not one."""
    if text is None:
        return None
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= 255 else None


def _take(tokens: Deque[str]) -> Optional[str]:
    return tokens.popleft() if tokens else None


def _parse_high_colour(tokens: Deque[str]) -> Optional[AnyColour]:
    """Read a 256-colour or true-colour specification after a 38 or 48 code."""
    if not tokens:
        return None

    if tokens[0] == "5":
        tokens.popleft()
        number = _parse_byte(_take(tokens))
        return Fixed(number) if number is not None else None

    if tokens[0] == "2":
        tokens.popleft()
        hexes = _take(tokens)
        if hexes is None:
            return None
        red = _parse_byte(hexes)
        green = _parse_byte(_take(tokens))
        blue = _parse_byte(_take(tokens))
        if red is not None and green is not None and blue is not None:
            return RGB(red, green, blue)

    return None


@dataclass(frozen=True)
class Pair:
    """One key=value entry of a colour definition string."""

    key: str
    value: str

    def to_style(self) -> Style:
        """Interpret the semicolon-separated ANSI codes of the value.

        Unknown or malformed codes are ignored.
        """
        style = Style()
        tokens = deque(self.value.split(";"))

        while tokens:
            code = tokens.popleft().lstrip("0")

            if code in _ATTRIBUTES:
                style = _ATTRIBUTES[code](style)
            elif code in _FOREGROUNDS:
                style = style.fg(_FOREGROUNDS[code])
            elif code in _BACKGROUNDS:
                style = style.on(_BACKGROUNDS[code])
            elif code == "38":
                colour = _parse_high_colour(tokens)
                if colour is not None:
                    style = style.fg(colour)
            elif code == "48":
                colour = _parse_high_colour(tokens)
                if colour is not None:
                    style = style.on(colour)

        return style


@dataclass(frozen=True)
class LSColors:
    """A colon-separated list of key=value colour definitions."""

    text: str

    def pairs(self) -> Iterator[Pair]:
        """Yield every well-formed pair, in order, skipping malformed ones."""
        for entry in self.text.split(":"):
            bits = entry.split("=")
            if len(bits) == 2 and bits[0] and bits[1]:
                yield Pair(key=bits[0], value=bits[1])