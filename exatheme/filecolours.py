"""Colouring of file names by glob pattern, and style overlays."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Pattern, Protocol, Tuple

from .style import Style

_SEPARATOR = "/"


class FileColours(Protocol):
    """Anything that may pick a style for a file name."""

    def colour_file(self, name: str) -> Optional[Style]:
        ...


@dataclass(frozen=True)
class NoFileColours:
    """A file colouriser that never picks a style."""

    def colour_file(self, name: str) -> Optional[Style]:
        """Always None: no file gets a special style."""
        return None


@dataclass(frozen=True)
class ChainedFileColours:
    """Try one colouriser, falling back to a second when it has no answer.

    This lets user-given associations take priority over a default set.
    """

    first: FileColours
    second: FileColours

    def colour_file(self, name: str) -> Optional[Style]:
        """The first colouriser's style for the name, else the second's."""
        style = self.first.colour_file(name)
        if style is not None:
            return style
        return self.second.colour_file(name)


def _char_class(specs: List[Tuple[str, str]], negated: bool) -> str:
    parts = []
    for start, end in specs:
        if start == end:
            parts.append(re.escape(start))
        elif start < end:
            parts.append(f"{re.escape(start)}-{re.escape(end)}")
    if not parts:
        return "." if negated else "(?!)"
    return "[" + ("^" if negated else "") + "".join(parts) + "]"


def _char_specs(chars: str) -> List[Tuple[str, str]]:
    specs = []
    i = 0
    while i < len(chars):
        if i + 3 <= len(chars) and chars[i + 1] == "-":
            specs.append((chars[i], chars[i + 2]))
            i += 3
        else:
            specs.append((chars[i], chars[i]))
            i += 1
    return specs


def _compile_glob(pattern: str) -> Pattern[str]:
    """Translate a glob pattern into a regular expression.

    Raises ValueError for malformed patterns: an unclosed or empty bracket
    expression, more than two stars in a row, or a ``**`` that is not a
    whole path component.
    """
    out: List[str] = []
    chars = pattern
    length = len(chars)
    i = 0

    while i < length:
        char = chars[i]

        if char == "?":
            out.append(".")
            i += 1

        elif char == "*":
            start = i
            while i < length and chars[i] == "*":
                i += 1
            count = i - start
            if count > 2:
                raise ValueError(
                    f"invalid glob {pattern!r}: wildcards are either "
                    "regular '*' or recursive '**'"
                )
            if count == 2:
                if not (start == 0 or chars[start - 1] == _SEPARATOR):
                    raise ValueError(
                        f"invalid glob {pattern!r}: recursive wildcards "
                        "must form a single path component"
                    )
                if i < length and chars[i] == _SEPARATOR:
                    i += 1
                elif i != length:
                    raise ValueError(
                        f"invalid glob {pattern!r}: recursive wildcards "
                        "must form a single path component"
                    )
            if not out or out[-1] != ".*":
                out.append(".*")

        elif char == "[":
            if i + 4 <= length and chars[i + 1] == "!":
                close = chars.find("]", i + 3)
                if close != -1:
                    out.append(_char_class(_char_specs(chars[i + 2:close]), True))
                    i = close + 1
                    continue
            elif i + 3 <= length and chars[i + 1] != "!":
                close = chars.find("]", i + 2)
                if close != -1:
                    out.append(_char_class(_char_specs(chars[i + 1:close]), False))
                    i = close + 1
                    continue
            raise ValueError(f"invalid glob {pattern!r}: invalid range pattern")

        else:
            out.append(re.escape(char))
            i += 1

    return re.compile("".join(out), re.DOTALL)


@dataclass
class ExtensionMappings:
    """An ordered list of glob patterns, each with the style it gives.

    When several patterns match, the one added last wins.
    """

    mappings: List[Tuple[str, Style]] = field(default_factory=list)
    _compiled: List[Pattern[str]] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._compiled = [_compile_glob(pattern) for pattern, _ in self.mappings]

    def __len__(self) -> int:
        return len(self.mappings)

    def __iter__(self) -> Iterator[Tuple[str, Style]]:
        return iter(self.mappings)

    def add(self, pattern: str, style: Style) -> None:
        """Append a mapping; raises ValueError if the glob is malformed."""
        compiled = _compile_glob(pattern)
        self.mappings.append((pattern, style))
        self._compiled.append(compiled)

    def colour_file(self, name: str) -> Optional[Style]:
        """The style of the last pattern that matches the name, if any."""
        for regex, (_, style) in zip(reversed(self._compiled), reversed(self.mappings)):
            if regex.fullmatch(name):
                return style
        return None


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend a base style with whatever the overlay sets.

    Colours set in the overlay replace those of the base, and attributes
    turned on in the overlay are turned on; nothing is ever turned off.
    """
    return replace(
        base,
        foreground=overlay.foreground if overlay.foreground is not None else base.foreground,
        background=overlay.background if overlay.background is not None else base.background,
        is_bold=base.is_bold or overlay.is_bold,
        is_dimmed=base.is_dimmed or overlay.is_dimmed,
        is_italic=base.is_italic or overlay.is_italic,
        is_underline=base.is_underline or overlay.is_underline,
        is_blink=base.is_blink or overlay.is_blink,
        is_reverse=base.is_reverse or overlay.is_reverse,
        is_hidden=base.is_hidden or overlay.is_hidden,
        is_strikethrough=base.is_strikethrough or overlay.is_strikethrough,
    )